"""Tests for tree flattening and translation content."""
import pytest


def _key(value):
    from transkey.keys import TranslationKey
    return TranslationKey(value)


# ── Flattener ────────────────────────────────────────────────────

class TestFlatten:
    @pytest.mark.parametrize("text", ["x", "Hello, world", "  padded  ", "zażółć"])
    def test_string_becomes_text(self, text):
        from transkey.content import Text
        from transkey.flatten import flatten
        assert flatten({"a": text}) == {_key("A"): Text(text)}

    def test_array_becomes_message_in_order(self):
        from transkey.content import Message
        from transkey.flatten import flatten
        lines = ["first", "second", "third"]
        result = flatten({"a": lines})
        assert result == {_key("A"): Message(("first", "second", "third"))}

    def test_nested_keys_compose_ancestor_first(self):
        from transkey.content import Text
        from transkey.flatten import flatten
        assert flatten({"a": {"b": "x"}}) == {_key("A_B"): Text("x")}

    def test_siblings_do_not_collide(self):
        from transkey.flatten import flatten
        result = flatten({"a": {"b": {"d": "1", "e": ["2"]}, "c": "3"}})
        assert set(result) == {_key("A_B_D"), _key("A_B_E"), _key("A_C")}

    def test_empty_object_contributes_nothing(self):
        from transkey.flatten import flatten
        assert flatten({"a": {}, "b": "x"}) == flatten({"b": "x"})

    def test_reflattening_flat_output_is_noop(self):
        from transkey.content import LocaleTranslations
        from transkey.flatten import flatten
        from transkey.locales import LocaleSource
        first = flatten({"menu": {"open": "Open", "help": ["a", "b"]}, "greeting": "hi"})
        tree = LocaleTranslations.from_flat(LocaleSource("en", "US"), first).to_tree()
        assert flatten(tree) == first

    def test_later_duplicate_path_wins(self):
        from transkey.content import Text
        from transkey.flatten import flatten
        result = flatten({"a_b": "flat", "a": {"b": "nested"}})
        assert result == {_key("A_B"): Text("nested")}

    @pytest.mark.parametrize("root", [[], ["a"], "text", 5, None])
    def test_root_must_be_object(self, root):
        from transkey.errors import UnsupportedRootKindError
        from transkey.flatten import flatten
        with pytest.raises(UnsupportedRootKindError):
            flatten(root)

    def test_empty_array_fails(self):
        from transkey.errors import InvalidMessageValueError
        from transkey.flatten import flatten
        with pytest.raises(InvalidMessageValueError) as info:
            flatten({"a": []})
        assert info.value.key == "A"

    @pytest.mark.parametrize("lines", [["ok", 1], [None], [["nested"]], [{"a": "b"}]])
    def test_non_string_line_fails(self, lines):
        from transkey.errors import InvalidMessageValueError
        from transkey.flatten import flatten
        with pytest.raises(InvalidMessageValueError):
            flatten({"a": lines})

    @pytest.mark.parametrize("value", ["", "   ", "\n\t"])
    def test_blank_text_fails(self, value):
        from transkey.errors import InvalidTextValueError
        from transkey.flatten import flatten
        with pytest.raises(InvalidTextValueError):
            flatten({"a": value})

    @pytest.mark.parametrize("value", [5, 1.5, True, None])
    def test_non_string_scalar_fails(self, value):
        from transkey.errors import InvalidTextValueError
        from transkey.flatten import flatten
        with pytest.raises(InvalidTextValueError):
            flatten({"a": {"b": value}})

    def test_error_reports_full_key(self):
        from transkey.errors import InvalidTextValueError
        from transkey.flatten import flatten
        with pytest.raises(InvalidTextValueError) as info:
            flatten({"menu": {"file": {"open": ""}}})
        assert info.value.key == "MENU_FILE_OPEN"

    def test_deep_nesting_fails_as_malformed(self):
        from transkey.errors import MalformedInputError
        from transkey.flatten import flatten
        root = "x"
        for _ in range(5000):
            root = {"a": root}
        with pytest.raises(MalformedInputError):
            flatten(root)

    def test_empty_root_key_fails(self):
        from transkey.errors import MalformedInputError
        from transkey.flatten import flatten
        with pytest.raises(MalformedInputError):
            flatten({"": "x"})


# ── Content ──────────────────────────────────────────────────────

class TestContent:
    def test_text_rejects_blank(self):
        from transkey.content import Text
        with pytest.raises(ValueError):
            Text(" ")

    def test_message_rejects_empty(self):
        from transkey.content import Message
        with pytest.raises(ValueError):
            Message(())

    def test_message_join(self):
        from transkey.content import Message
        assert Message(["a", "b"]).join("|") == "a|b"
        assert str(Message(["a", "b"])) == "a\nb"

    def test_replace(self):
        from transkey.content import Message, Text
        text = Text("Hi {name}")
        assert text.replace("{name}", "Ann") == Text("Hi Ann")
        assert text.replace("{other}", "Ann") is text
        assert text.replace("", "Ann") is text
        message = Message(["{n} one", "two {n}"])
        assert message.replace("{n}", 1).lines == ("1 one", "two 1")

    def test_replace_all(self):
        from transkey.content import Replacer, Text
        replacer = Replacer().set("{a}", 1).set("{b}", "two")
        assert Text("{a} and {b}").replace_all(replacer) == Text("1 and two")
        assert Text("{a}").replace_all({"{a}": "x"}) == Text("x")

    def test_replace_all_skips_empty_values(self):
        from transkey.content import Message, Replacer, Text
        text = Text("{a}")
        assert text.replace_all({"{a}": ""}) is text
        assert Text("{a} {b}").replace_all({"{a}": "", "{b}": "x"}) == Text("{a} x")
        message = Message(["{a}"])
        assert message.replace_all(Replacer().set("{a}", "")) is message

    def test_replacer_ignores_braces(self):
        from transkey.content import Replacer
        assert Replacer({"{x}": "1"}).apply("{x} {unknown} {") == "1 {unknown} {"

    def test_locale_translations_partition(self):
        from transkey.content import LocaleTranslations, Message, Text
        from transkey.flatten import flatten
        from transkey.locales import LocaleSource
        lt = LocaleTranslations.from_flat(
            LocaleSource("en", "US"), flatten({"a": "x", "b": ["y"], "c": {"d": "z"}})
        )
        assert lt.number_of_texts == 2
        assert lt.number_of_messages == 1
        assert lt.find_text("a") == Text("x")
        assert lt.find_message("B") == Message(["y"])
        assert lt.find_text("b") is None
        assert "C_D" in lt
        assert "missing" not in lt
        assert len(lt) == 3

    def test_locale_translations_reject_key_in_both_maps(self):
        from transkey.content import LocaleTranslations, Message, Text
        from transkey.locales import LocaleSource
        with pytest.raises(ValueError):
            LocaleTranslations(
                LocaleSource("en"), {_key("A"): Text("x")}, {_key("A"): Message(["y"])}
            )

    def test_locale_translations_read_only(self):
        from transkey.content import LocaleTranslations, Text
        from transkey.locales import LocaleSource
        lt = LocaleTranslations(LocaleSource("en"), {_key("A"): Text("x")})
        with pytest.raises(TypeError):
            lt.texts[_key("B")] = Text("y")
