import pytest

from nerdlog.textfmt import clear_tview_formatting, highlight_rune


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[yellow]Yellow text", "Yellow text"),
        ("[yellow:red]Yellow text on red background", "Yellow text on red background"),
        ("[:red]Red background", "Red background"),
        ("[yellow::u]Underlined text", "Underlined text"),
        ("[::bl]Bold blinking", "Bold blinking"),
        ("[::-]Text after reset", "Text after reset"),
        ("[-]No color", "No color"),
        ("[::i]Italic text", "Italic text"),
        ("[::I]Normal text", "Normal text"),
        ("Click [:::https://example.com]here[:::-] for more", "Click here for more"),
        (
            "Email [:::mailto:a@example.com]a/[:::mail:b@example.com]b/[:::mail:c@example.com]c[:::-]",
            "Email a/b/c",
        ),
        ("[-:-:-:-]Clean", "Clean"),
        ("[:]Still here", "Still here"),
        ("[]Bracket tag", "Bracket tag"),
        ("[red[]Text", "[red]Text"),
        ('["123"[]hello', '["123"]hello'),
        ("[#6aff00[[]Greenish", "[#6aff00[]Greenish"),
        ('[a#"[[[]stuff', '[a#"[[]stuff'),
        ("Start [yellow]middle[::u]under[:::-]end", "Start middleunderend"),
    ],
    ids=[
        "simple_color",
        "background_color",
        "only_background",
        "underline",
        "bold_and_blinking",
        "reset_styles",
        "reset_foreground",
        "italic_on",
        "italic_off",
        "link_formatting",
        "multiple_mailto_links",
        "reset_everything",
        "noop_tag",
        "invalid_tag",
        "escaped_tag",
        "escaped_quoted_tag",
        "escaped_color_tag",
        "escaped_nonsense",
        "mixed_content",
    ],
)
def test_clear_tview_formatting(text, expected):
    assert clear_tview_formatting(text) == expected


def test_clear_tview_formatting_double_bracket_is_literal():
    assert clear_tview_formatting("a[[b") == "a[b"


def test_clear_tview_formatting_keeps_non_ascii():
    assert clear_tview_formatting("[red]▘ mark[-] é") == "▘ mark é"


def test_highlight_rune_middle():
    assert highlight_rune("hello", 1, "[", "]") == "h[e]llo"


def test_highlight_rune_multibyte_char():
    assert highlight_rune("ab€c", 2, "<", ">") == "ab<€>c"


def test_highlight_rune_last_char():
    assert highlight_rune("abc", 2, "(", ")") == "ab(c)"


@pytest.mark.parametrize("index", [-1, 5, 100])
def test_highlight_rune_out_of_range(index):
    assert highlight_rune("hello", index, "[", "]") == "hello"