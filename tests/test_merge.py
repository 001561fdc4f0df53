import pytest

from pot_extractor.errors import NonEmptyTemplateTranslation
from pot_extractor.merge import merge_template
from pot_extractor.message import (EXTRACTED, FLAG, Comment, Headers,
                                   autogenerated, is_blank, key)

from helpers import catalog, plural, singular, translator_comment


def test_matching_message_takes_new_references():
    existing = catalog(singular("hello", references=[("a.ex", 1)]))
    new = catalog(singular("hello", references=[("b.ex", 5)]))

    merged = merge_template(existing, new)

    assert len(merged.translations) == 1
    message = merged.translations[0]
    assert message.msgid == "hello"
    assert message.msgstr == ""
    assert message.references == [("b.ex", 5)]


def test_matching_message_keeps_existing_comments():
    comments = [translator_comment("greeting"), Comment(FLAG, "elixir-format")]
    existing = catalog(singular("hello", comments=comments))
    new = catalog(singular("hello", references=[("b.ex", 5)]))

    message = merge_template(existing, new).translations[0]

    assert message.comments == comments
    assert message.references == [("b.ex", 5)]


def test_autogenerated_message_without_match_is_dropped():
    existing = catalog(singular("bye", references=[("a.ex", 1)]))

    merged = merge_template(existing, catalog())

    assert merged.translations == []


def test_message_with_extracted_comment_is_still_autogenerated():
    existing = catalog(singular("bye", comments=[Comment(EXTRACTED, "x")]))

    assert merge_template(existing, catalog()).translations == []


def test_commented_message_without_match_is_kept():
    bye = singular("bye", comments=[translator_comment("keep me")],
                   references=[("a.ex", 1)])
    existing = catalog(bye)

    merged = merge_template(existing, catalog())

    assert merged.translations == [bye]


def test_non_empty_existing_msgstr_fails():
    existing = catalog(singular("hi", msgstr="salut"))
    new = catalog(singular("hi"))

    with pytest.raises(NonEmptyTemplateTranslation) as excinfo:
        merge_template(existing, new)
    assert "'hi'" in str(excinfo.value)


def test_non_empty_new_msgstr_fails():
    existing = catalog(singular("hi"))
    new = catalog(singular("hi", msgstr="salut"))

    with pytest.raises(NonEmptyTemplateTranslation):
        merge_template(existing, new)


def test_non_empty_plural_msgstr_fails():
    existing = catalog(plural("one", "many", msgstr={0: "", 1: "plusieurs"}))
    new = catalog(plural("one", "many"))

    with pytest.raises(NonEmptyTemplateTranslation) as excinfo:
        merge_template(existing, new)
    assert "plural translation" in str(excinfo.value)


def test_non_empty_msgstr_without_match_is_left_alone():
    hi = singular("hi", msgstr="salut", comments=[translator_comment("x")])

    assert merge_template(catalog(hi), catalog()).translations == [hi]


def test_new_message_is_appended():
    existing = catalog(singular("hello", references=[("a.ex", 1)]))
    new_one = singular("new one", references=[("c.ex", 3)])
    new = catalog(singular("hello", references=[("a.ex", 2)]), new_one)

    merged = merge_template(existing, new)

    assert [m.msgid for m in merged.translations] == ["hello", "new one"]
    appended = merged.translations[1]
    assert appended == new_one
    assert appended.msgstr == ""
    assert appended.comments == []


def test_existing_order_comes_first():
    existing = catalog(singular("zeta", references=[("a.ex", 1)]),
                       singular("alpha", references=[("a.ex", 2)]))
    new = catalog(singular("alpha"), singular("beta"), singular("zeta"))

    merged = merge_template(existing, new)

    assert [m.msgid for m in merged.translations] == ["zeta", "alpha", "beta"]


def test_plural_identity_includes_msgid_plural():
    existing = catalog(plural("apple", "apples", references=[("a.ex", 1)]))
    new = catalog(plural("apple", "applez", references=[("a.ex", 9)]))

    merged = merge_template(existing, new)

    assert [key(m) for m in merged.translations] == [("apple", "applez")]


def test_singular_and_plural_with_same_msgid_are_different_messages():
    existing = catalog(singular("apple", references=[("a.ex", 1)]))
    new = catalog(plural("apple", "apples", references=[("a.ex", 1)]))

    merged = merge_template(existing, new)

    assert [key(m) for m in merged.translations] == [("apple", "apples")]


def test_plural_match_keeps_existing_msgstr_slots():
    existing = catalog(plural("apple", "apples", msgstr={0: "", 1: "", 2: ""},
                              references=[("a.ex", 1)]))
    new = catalog(plural("apple", "apples", references=[("b.ex", 2)]))

    message = merge_template(existing, new).translations[0]

    assert message.msgstr == {0: "", 1: "", 2: ""}
    assert message.references == [("b.ex", 2)]


def test_headers_come_from_existing():
    headers = Headers(comment="SOME TITLE", metadata={"Language": "en"})

    merged = merge_template(catalog(headers=headers),
                            catalog(singular("hello")))

    assert merged.headers == headers


def test_merge_does_not_modify_inputs():
    old = singular("hello", references=[("a.ex", 1)],
                   comments=[translator_comment("hi")])
    new = singular("hello", references=[("b.ex", 5)])

    merge_template(catalog(old), catalog(new))

    assert old.references == [("a.ex", 1)]
    assert new.comments == []


def test_merging_twice_changes_nothing():
    existing = catalog(singular("bye"),
                       singular("kept", comments=[translator_comment("x")]),
                       singular("hello", references=[("a.ex", 1)]))
    new = catalog(singular("hello", references=[("b.ex", 5)]),
                  singular("new one", references=[("c.ex", 3)]))

    once = merge_template(existing, new)
    twice = merge_template(once, new)

    assert twice == once


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank({})
    assert is_blank({0: "", 1: None})
    assert not is_blank("x")
    assert not is_blank({0: "", 1: "x"})


def test_autogenerated_only_looks_at_translator_comments():
    assert autogenerated(singular("a"))
    assert autogenerated(singular("a", comments=[Comment(FLAG, "fuzzy")]))
    assert not autogenerated(
        singular("a", comments=[translator_comment("manual")]))


def test_plural_error_names_the_whole_identity():
    existing = catalog(plural("one", "many", msgstr={0: "un", 1: ""}))

    with pytest.raises(NonEmptyTemplateTranslation) as excinfo:
        merge_template(existing, catalog(plural("one", "many")))
    assert excinfo.value.key == ("one", "many")
    assert "'one'" in str(excinfo.value)
    assert "'many'" in str(excinfo.value)


def test_plural_with_no_msgstr_slots_is_blank():
    existing = catalog(plural("one", "many", msgstr={},
                              references=[("a.ex", 1)]))
    new = catalog(plural("one", "many", references=[("b.ex", 2)]))

    message = merge_template(existing, new).translations[0]

    assert message.msgstr == {}
    assert message.references == [("b.ex", 2)]
