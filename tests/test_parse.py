"""Tests for commit message parsing."""
from commitgate.commit_message.parse import parse_commit_message


def test_parse_header_parts():
    commit = parse_commit_message("feat(core): add a thing\n\nSome body text here.")
    assert commit.header == "feat(core): add a thing"
    assert commit.type == "feat"
    assert commit.scope == "core"
    assert commit.subject == "add a thing"
    assert commit.body == "Some body text here."
    assert not commit.is_fixup
    assert not commit.is_squash
    assert not commit.is_revert


def test_parse_header_without_scope():
    commit = parse_commit_message("docs: update readme")
    assert commit.type == "docs"
    assert commit.scope == ""
    assert commit.subject == "update readme"


def test_parse_unstructured_header():
    commit = parse_commit_message("Update stuff")
    assert commit.header == "Update stuff"
    assert commit.type == ""
    assert commit.subject == ""


def test_parse_markers_are_stripped_from_header():
    fixup = parse_commit_message("fixup! feat(core): add a thing")
    assert fixup.is_fixup
    assert fixup.header == "feat(core): add a thing"

    squash = parse_commit_message("squash! fix(cli): handle errors")
    assert squash.is_squash
    assert squash.header == "fix(cli): handle errors"

    revert = parse_commit_message("revert: feat(core): add a thing")
    assert revert.is_revert
    assert revert.header == "feat(core): add a thing"


def test_parse_markers_case_insensitive():
    assert parse_commit_message("Revert feat(core): add a thing").is_revert
    assert parse_commit_message("FIXUP! feat(core): add a thing").is_fixup


def test_parse_notes_go_to_footer():
    message = (
        "feat(core): remove old api\n"
        "\n"
        "The old api is gone.\n"
        "\n"
        "BREAKING CHANGE: `oldApi` was removed.\n"
        "Use `newApi` instead.\n"
        "DEPRECATED: `otherApi` will be removed."
    )
    commit = parse_commit_message(message, sha="abc")
    assert commit.sha == "abc"
    assert commit.body == "The old api is gone."
    assert commit.footer.startswith("BREAKING CHANGE:")
    assert commit.breaking_changes == ["`oldApi` was removed.\nUse `newApi` instead."]
    assert commit.deprecations == ["`otherApi` will be removed."]


def test_parse_misspelled_note_stays_in_body():
    commit = parse_commit_message("fix(core): patch\n\nBREAKING CHANGES: removed X")
    assert commit.breaking_changes == []
    assert commit.body == "BREAKING CHANGES: removed X"


def test_parse_drops_comment_lines():
    message = (
        "fix(core): patch\n"
        "\n"
        "Body of the commit message.\n"
        "# Please enter the commit message for your changes.\n"
        "# Lines starting with '#' will be ignored."
    )
    commit = parse_commit_message(message)
    assert commit.body == "Body of the commit message."
    assert commit.full_text == message
