"""
Tests for the teia command-line interface (teia/cli.py, teia/commands/)

Run: python -m pytest tests/test_cli.py -q
"""

import sys
import os
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from teia.cli import build_parser, main
from tei_model import sample_tei


DOC = '<TEI><text><div xml:id="p1"><p>I met John today</p></div></text></TEI>'


@pytest.fixture
def doc_file(tmp_path):
    path = tmp_path / "doc.xml"
    path.write_text(DOC, encoding="utf-8")
    return path


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_sample_writes_file(tmp_path):
    out = tmp_path / "sample.xml"
    main(["sample", "--out", str(out)])
    assert out.read_text(encoding="utf-8") == sample_tei()
    with pytest.raises(SystemExit):
        main(["sample", "--out", str(out)])


def test_tag_then_untag_round_trip(doc_file, tmp_path):
    tagged = tmp_path / "tagged.xml"
    main(["tag", str(doc_file), "--path", "0:0:0:0:0", "--start", "6", "--end", "10",
          "--entity", "persName", "--out", str(tagged)])
    assert "<p>I met <persName>John</persName> today</p>" in tagged.read_text(encoding="utf-8")
    assert doc_file.read_text(encoding="utf-8") == DOC

    main(["untag", str(tagged), "--path", "0:0:0:0:1"])
    assert "<p>I met John today</p>" in tagged.read_text(encoding="utf-8")


def test_tag_rejects_bad_offsets(doc_file):
    with pytest.raises(SystemExit):
        main(["tag", str(doc_file), "--path", "0:0:0:0:0", "--start", "10", "--end", "99"])


def test_tag_rejects_bad_path(doc_file):
    with pytest.raises(SystemExit):
        main(["tag", str(doc_file), "--path", "x:y"])


def test_noop_does_not_write(doc_file, tmp_path):
    out = tmp_path / "out.xml"
    main(["untag", str(doc_file), "--path", "0:0:0:0:0", "--out", str(out)])
    assert not out.exists()


def test_accept_all_overwrites_input(tmp_path):
    path = tmp_path / "review.xml"
    path.write_text(
        '<TEI><text><div xml:id="p1"><p><suggestion mode="addition" type="placeName">'
        'Paris</suggestion></p></div></text></TEI>',
        encoding="utf-8",
    )
    main(["accept-all", str(path)])
    assert "<placeName>Paris</placeName>" in path.read_text(encoding="utf-8")
    assert "suggestion" not in path.read_text(encoding="utf-8")


def test_missing_or_malformed_file(tmp_path):
    with pytest.raises(SystemExit):
        main(["pages", str(tmp_path / "missing.xml")])
    broken = tmp_path / "broken.xml"
    broken.write_text("<TEI><text>", encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["pages", str(broken)])


def test_pages_and_suggestions_listing(doc_file):
    main(["pages", str(doc_file)])
    main(["suggestions", str(doc_file), "--page", "p1"])
    with pytest.raises(SystemExit):
        main(["suggestions", str(doc_file), "--page", "nope"])


def test_accept_invalid_type_exits_without_writing(tmp_path):
    path = tmp_path / "review.xml"
    markup = (
        '<TEI><text><div xml:id="p1"><p><suggestion mode="addition" type="foo bar">'
        'Paris</suggestion></p></div></text></TEI>'
    )
    path.write_text(markup, encoding="utf-8")
    with pytest.raises(SystemExit):
        main(["accept", str(path), "--path", "0:0:0:0:0"])
    with pytest.raises(SystemExit):
        main(["accept-all", str(path)])
    assert path.read_text(encoding="utf-8") == markup
