"""Tests for the editable preview session and its store."""

import threading

from preview import (
    NO_COMPONENT_CODE,
    NO_RAW_RESPONSE,
    GenerationStore,
    PreviewSession,
    sample_generation,
)
from models import GeneratedHTML

ORIGINAL = "<html>\n<body>v1</body>\n</html>"


def generation(id_="g1", name="My Landing Page", **kwargs):
    return GeneratedHTML(id=id_, name=name, html=ORIGINAL, **kwargs)


class TestPreviewSession:
    def test_starts_clean(self):
        session = PreviewSession(generation())

        assert session.preview_html == ORIGINAL
        assert session.has_changes is False

    def test_edit_marks_changes_and_updates_preview(self):
        session = PreviewSession(generation())

        session.edit("<html>v2</html>")

        assert session.has_changes is True
        assert session.preview_html == "<html>v2</html>"
        assert session.editor_content("html") == "<html>v2</html>"

    def test_editing_back_to_original_clears_flag(self):
        session = PreviewSession(generation())
        session.edit("<html>v2</html>")

        session.edit(ORIGINAL)

        assert session.has_changes is False

    def test_none_edit_is_ignored(self):
        session = PreviewSession(generation())

        session.edit(None)

        assert session.edited_html == ORIGINAL
        assert session.has_changes is False

    def test_save_promotes_edit(self):
        session = PreviewSession(generation())
        session.edit("<html>v2</html>")

        saved = session.save()

        assert saved.html == "<html>v2</html>"
        assert session.generation.html == "<html>v2</html>"
        assert session.has_changes is False

    def test_discard_restores_saved_html(self):
        session = PreviewSession(generation())
        session.edit("<html>broken")

        session.discard()

        assert session.preview_html == ORIGINAL
        assert session.edited_html == ORIGINAL
        assert session.has_changes is False

    def test_placeholders_for_missing_code(self):
        session = PreviewSession(generation())

        assert session.editor_content("react") == NO_COMPONENT_CODE
        assert session.editor_content("raw") == NO_RAW_RESPONSE

    def test_other_tabs_show_generation_fields(self):
        session = PreviewSession(generation(react_code="export default X;", raw_response="```html```"))

        assert session.editor_content("react") == "export default X;"
        assert session.editor_content("raw") == "```html```"

    def test_download_filename(self):
        session = PreviewSession(generation(name="My  Landing\tPage"))

        assert session.download_filename == "my-landing-page.html"

    def test_stats(self):
        session = PreviewSession(generation())
        session.edit("a\nb")

        assert session.stats() == {"characters": 3, "lines": 2, "modified": True}

    def test_to_json_is_serialisable(self):
        payload = PreviewSession(generation()).to_json()

        assert payload["generation"]["id"] == "g1"
        assert isinstance(payload["generation"]["created_at"], str)
        assert payload["download_filename"] == "my-landing-page.html"


class TestGenerationStore:
    def test_add_and_get(self):
        store = GenerationStore()
        session = store.add(generation())

        assert store.get("g1") is session
        assert store.get("missing") is None
        assert len(store) == 1

    def test_recent_is_newest_first(self):
        store = GenerationStore()
        store.add(generation("a"))
        store.add(generation("b"))

        assert [g.id for g in store.recent()] == ["b", "a"]

    def test_oldest_entries_are_dropped(self):
        store = GenerationStore(max_entries=2)
        for id_ in ("a", "b", "c"):
            store.add(generation(id_))

        assert store.get("a") is None
        assert len(store) == 2

    def test_recent_reflects_saved_html(self):
        store = GenerationStore()
        session = store.add(generation())
        session.edit("<p>new</p>")
        session.save()

        assert store.recent()[0].html == "<p>new</p>"


def test_sample_generation():
    sample = sample_generation()

    assert sample.id == "test-sample"
    assert sample.name == "SampleCard"
    assert sample.html.startswith("<!DOCTYPE html>")
    assert sample.metadata.ai_model == "Sample Generator"


def test_concurrent_edits_leave_a_consistent_session():
    session = PreviewSession(generation())
    drafts = [f"<p>draft {i}</p>" for i in range(8)]
    mismatches = []

    def worker(draft):
        for _ in range(200):
            session.edit(draft)
            snapshot = session.to_json()
            if snapshot["has_changes"] != (snapshot["stats"]["characters"] != len(ORIGINAL)):
                mismatches.append(snapshot)
            session.discard()

    threads = [threading.Thread(target=worker, args=(d,)) for d in drafts]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert mismatches == []
    assert session.has_changes == (session.edited_html != session.generation.html)
    assert session.preview_html == ORIGINAL
