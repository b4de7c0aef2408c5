"""
Tests for the editor session (tei_edit/session.py)

Async annotation calls are driven with asyncio.run and a fake annotator,
no network.

Run: python -m pytest tests/test_session.py -q
"""

import sys
import os
import asyncio
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from tei_model import (
    EntityType,
    MalformedMarkupError,
    OffsetOutOfRangeError,
    Selection,
    parse_document,
    serialize_document,
    serialize_node,
)
from tei_edit import EditorSession


DOC = (
    '<TEI><text>'
    '<div xml:id="p1"><p>I met John today</p></div>'
    '<div xml:id="p2"><p>In <placeName>Paris</placeName></p></div>'
    '</text></TEI>'
)
TEXT_PATH = (0, 0, 0, 0, 0)   # "I met John today"


# ---------------------------------------------------------------------------
# Test helpers
# ---------------------------------------------------------------------------

class FakeAnnotator:
    """Zwraca przygotowane odpowiedzi i zapisuje wywołania."""

    def __init__(self, annotate_reply="", review_reply="", during_call=None, error=None, block=False):
        self.annotate_reply = annotate_reply
        self.review_reply = review_reply
        self.during_call = during_call
        self.error = error
        self.block = block
        self.calls = []

    async def _respond(self, reply):
        await asyncio.sleep(0)
        if self.block:
            await asyncio.Event().wait()
        if self.error is not None:
            raise self.error
        if self.during_call:
            self.during_call()
        return reply

    async def annotate(self, text):
        self.calls.append(("annotate", text))
        return await self._respond(self.annotate_reply)

    async def review(self, markup, is_full_document=False):
        self.calls.append(("review", markup, is_full_document))
        return await self._respond(self.review_reply)


def _john():
    return Selection(TEXT_PATH, 6, 10, "John")


def _canonical(markup):
    return serialize_document(parse_document(markup))


# ---------------------------------------------------------------------------
# Manual editing and history
# ---------------------------------------------------------------------------

def test_new_session_state():
    session = EditorSession(DOC)
    assert [p.id for p in session.pages] == ["p1", "p2"]
    assert session.suggestions == []
    assert len(session.history) == 1
    assert not session.review_complete


def test_tag_selection_and_undo():
    session = EditorSession(DOC)
    assert session.tag_selection(_john(), EntityType.PERSON)
    assert "<p>I met <persName>John</persName> today</p>" in session.export()
    assert len(session.history) == 2

    assert session.undo()
    assert session.export() == _canonical(DOC)
    assert not session.undo()


def test_tag_selection_bad_offsets():
    session = EditorSession(DOC)
    with pytest.raises(OffsetOutOfRangeError):
        session.tag_selection(Selection(TEXT_PATH, 10, 40, ""), EntityType.NAME)
    assert len(session.history) == 1


def test_noop_does_not_grow_history():
    session = EditorSession(DOC)
    assert not session.untag((0, 0, 0, 0, 0))    # węzeł tekstowy
    assert not session.untag((9,))
    assert not session.decline_suggestion((0, 0, 1))
    assert len(session.history) == 1


def test_untag_and_set_text():
    session = EditorSession(DOC)
    assert session.untag((0, 0, 1, 0, 1))
    assert "<p>In Paris</p>" in session.export()
    assert session.set_text((0, 0, 1, 0, 0), "W Paryżu")
    assert "<p>W Paryżu</p>" in session.export()
    assert len(session.history) == 3


def test_load_starts_fresh():
    session = EditorSession(DOC)
    session.tag_selection(_john(), EntityType.PERSON)
    session.load("<TEI><text><div xml:id='z'/></text></TEI>")
    assert len(session.history) == 1
    assert [p.id for p in session.pages] == ["z"]


def test_load_malformed_raises():
    with pytest.raises(MalformedMarkupError):
        EditorSession("<TEI><text>")


def test_reset_page_restores_original():
    session = EditorSession(DOC)
    session.tag_selection(_john(), EntityType.PERSON)
    session.untag((0, 0, 1, 0, 1))
    assert session.reset_page("p1")
    assert "<p>I met John today</p>" in session.export()
    assert "<p>In Paris</p>" in session.export()
    assert not session.reset_page("missing")


def test_toggle_page_status():
    session = EditorSession(DOC)
    assert session.toggle_page_status("p1") is True
    assert session.toggle_page_status("p1") is False
    assert session.page_status == {"p1": False}


def test_accept_and_decline_suggestions():
    markup = (
        '<TEI><text><div xml:id="p1"><p>'
        '<suggestion mode="addition" type="persName">A</suggestion> and '
        '<suggestion mode="deletion"><name>B</name></suggestion>'
        '</p></div></text></TEI>'
    )
    session = EditorSession(markup)
    assert len(session.suggestions) == 2
    first, second = session.suggestions
    assert session.decline_suggestion(second.path)
    assert session.accept_suggestion(first.path)
    assert session.suggestions == []
    assert "<p><persName>A</persName> and <name>B</name></p>" in session.export()


def test_accept_all_in_session():
    markup = (
        '<TEI><text><div xml:id="p1"><p><suggestion>A</suggestion></p></div>'
        '<div xml:id="p2"><p><suggestion>B</suggestion></p></div></text></TEI>'
    )
    session = EditorSession(markup)
    p2 = session.pages[1]
    assert session.accept_all(p2.path)
    assert [s.text for s in session.suggestions] == ["A"]
    assert session.accept_all()
    assert not session.accept_all()


# ---------------------------------------------------------------------------
# Annotation service
# ---------------------------------------------------------------------------

def test_auto_tag_selection_splices_reply():
    annotator = FakeAnnotator(annotate_reply="<persName>John</persName>")
    session = EditorSession(DOC, annotator=annotator)
    assert asyncio.run(session.auto_tag_selection(_john()))
    assert annotator.calls == [("annotate", "John")]
    assert "<p>I met <persName>John</persName> today</p>" in session.export()
    assert len(session.history) == 2


def test_auto_tag_selection_malformed_reply_changes_nothing():
    session = EditorSession(DOC, annotator=FakeAnnotator(annotate_reply="<persName>John"))
    with pytest.raises(MalformedMarkupError):
        asyncio.run(session.auto_tag_selection(_john()))
    assert session.export() == _canonical(DOC)
    assert len(session.history) == 1


def test_auto_tag_selection_unchanged_reply_is_noop():
    session = EditorSession(DOC, annotator=FakeAnnotator(annotate_reply="John"))
    assert not asyncio.run(session.auto_tag_selection(_john()))
    assert len(session.history) == 1


def test_service_call_requires_annotator():
    session = EditorSession(DOC)
    with pytest.raises(RuntimeError):
        asyncio.run(session.auto_tag_selection(_john()))


def test_document_changed_during_call():
    session = EditorSession(DOC)
    session.annotator = FakeAnnotator(
        annotate_reply="<persName>John</persName>",
        during_call=lambda: session.untag((0, 0, 1, 0, 1)),
    )
    with pytest.raises(RuntimeError):
        asyncio.run(session.auto_tag_selection(_john()))
    assert "<persName>John</persName>" not in session.export()


def test_review_page_replaces_only_that_page():
    reply = (
        '<div xml:id="p1"><p>I met '
        '<suggestion mode="addition" type="persName" reason="person">John</suggestion>'
        ' today</p></div>'
    )
    annotator = FakeAnnotator(review_reply=reply)
    session = EditorSession(DOC, annotator=annotator)
    assert asyncio.run(session.review_page("p1"))

    kind, markup, full = annotator.calls[0]
    assert kind == "review" and full is False
    assert markup == serialize_node(parse_document(DOC).find("div"))

    [suggestion] = session.suggestions
    assert suggestion.reason == "person"
    assert "<placeName>Paris</placeName>" in session.export()
    assert not session.review_complete

    assert session.accept_suggestion(suggestion.path)
    assert "<p>I met <persName>John</persName> today</p>" in session.export()


def test_review_unknown_page():
    annotator = FakeAnnotator(review_reply="<div/>")
    session = EditorSession(DOC, annotator=annotator)
    assert not asyncio.run(session.review_page("nope"))
    assert annotator.calls == []


def test_review_page_malformed_reply():
    session = EditorSession(DOC, annotator=FakeAnnotator(review_reply="<div><p>broken</div>"))
    with pytest.raises(MalformedMarkupError):
        asyncio.run(session.review_page("p1"))
    assert len(session.history) == 1


def test_review_document_marks_complete():
    reply = DOC.replace(
        "<placeName>Paris</placeName>",
        '<suggestion mode="deletion" reason="not a place"><placeName>Paris</placeName></suggestion>',
    )
    annotator = FakeAnnotator(review_reply=reply)
    session = EditorSession(DOC, annotator=annotator)
    assert asyncio.run(session.review_document())
    assert annotator.calls[0][2] is True
    assert session.review_complete
    [suggestion] = session.suggestions
    assert session.accept_suggestion(suggestion.path)
    assert "<p>In Paris</p>" in session.export()


# ---------------------------------------------------------------------------
# Failed and cancelled service calls
# ---------------------------------------------------------------------------

SERVICE_CALLS = [
    lambda s: s.auto_tag_selection(_john()),
    lambda s: s.review_page("p1"),
    lambda s: s.review_document(),
]


@pytest.mark.parametrize("call", SERVICE_CALLS, ids=["annotate", "review_page", "review_document"])
def test_cancelled_call_leaves_session_unchanged(call):
    session = EditorSession(DOC, annotator=FakeAnnotator(
        annotate_reply="<persName>John</persName>",
        review_reply=DOC,
        error=asyncio.CancelledError(),
    ))
    before = session.export()
    with pytest.raises(asyncio.CancelledError):
        asyncio.run(call(session))
    assert session.export() == before
    assert len(session.history) == 1
    assert not session.review_complete


@pytest.mark.parametrize("call", SERVICE_CALLS, ids=["annotate", "review_page", "review_document"])
def test_cancelled_task_leaves_session_unchanged(call):
    session = EditorSession(DOC, annotator=FakeAnnotator(block=True))
    before = session.export()

    async def scenario():
        task = asyncio.create_task(call(session))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())
    assert session.annotator.calls
    assert session.export() == before
    assert len(session.history) == 1
    assert not session.review_complete


def test_failed_call_leaves_session_unchanged():
    session = EditorSession(DOC, annotator=FakeAnnotator(error=RuntimeError("quota")))
    before = session.export()
    with pytest.raises(RuntimeError):
        asyncio.run(session.review_document())
    assert session.export() == before
    assert len(session.history) == 1


# ---------------------------------------------------------------------------
# Invalid tag names
# ---------------------------------------------------------------------------

def test_accept_invalid_type_keeps_history_parseable():
    markup = (
        '<TEI><text><div xml:id="p1"><p>'
        '<suggestion mode="addition" type="foo bar">X</suggestion>'
        '</p></div></text></TEI>'
    )
    session = EditorSession(markup)
    [suggestion] = session.suggestions
    with pytest.raises(MalformedMarkupError):
        session.accept_suggestion(suggestion.path)
    with pytest.raises(MalformedMarkupError):
        session.accept_all()
    assert len(session.history) == 1
    parse_document(session.export())

    assert session.accept_suggestion(suggestion.path, type_="persName")
    assert session.undo()
    assert session.suggestions == [suggestion]
