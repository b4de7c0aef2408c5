"""tei_model/sample.py — przykładowy dokument TEI (dwie strony, tekst hebrajski)."""

from __future__ import annotations

_SAMPLE_TEI = """<?xml version="1.0" encoding="UTF-8"?>
<TEI xmlns="http://www.tei-c.org/ns/1.0">
  <teiHeader>
    <fileDesc>
      <titleStmt><title>Sample Hebrew Document</title></titleStmt>
      <publicationStmt><p>Demo</p></publicationStmt>
      <sourceDesc><p>Generated for demo</p></sourceDesc>
    </fileDesc>
  </teiHeader>
  <text>
    <body>
      <div xml:id="page_01">
        <fw type="header">Page 1 - Catchword</fw>
        <p>
          מעשה שהיה ב<placeName>סטמבול</placeName> עם ר׳ <persName>נפתלי</persName>.
          הוא שלח אגרת ל<persName>ישראל</persName> ב<placeName>ארץ ישראל</placeName>.
        </p>
      </div>
      <div xml:id="page_02">
        <fw type="footer">Catchword: שם</fw>
        <p>
          שמעתי מפי ר׳ <persName>יצחק</persName> שגר ב<placeName>פראנקפורט דמיין</placeName>.
          הוא אמר ש<name>ישראל</name> הם עם קדוש לה׳.
        </p>
      </div>
    </body>
  </text>
</TEI>"""


def sample_tei() -> str:
    return _SAMPLE_TEI
