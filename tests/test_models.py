from term_markdown.models import RenderState, Tag, TagKind


def test_render_state_defaults():
    state = RenderState()

    assert state.buffer == []
    assert state.in_code_block is False
    assert state.is_empty()
    assert not state.ends_with_newline()
    assert state.getvalue() == ""


def test_render_state_skips_empty_chunks():
    state = RenderState()

    state.append("")

    assert state.is_empty()


def test_render_state_tracks_trailing_newline():
    state = RenderState()

    state.append("a\n")
    assert state.ends_with_newline()

    state.append("b")
    assert not state.ends_with_newline()
    assert state.getvalue() == "a\nb"


def test_tag_defaults():
    tag = Tag(TagKind.CODE_BLOCK)

    assert tag.language == ""
    assert tag.ordered is False
    assert tag.start is None
    assert tag.destination == ""
    assert tag.title == ""
