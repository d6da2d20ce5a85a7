import pytest

from nerdlog.msgsize import max_line_length, num_lines, optimal_message_view_size

LONG_TEXT = "\n".join(
    [
        "Feidsld lsdkfjw ad asdfajksfka; asdflkj kdjfh asjdfhsjdf q;wlkx asdfkd qpdkj",
        "",
        "asdfj qdfkqdjfa;slkdfj asdqd",
        "asdlfkj skaj;lksdfja",
        "a;slkdfj;alskd ;alkdjf;aslkdjqd",
        "",
        "",
        "a;sldkfa al;ksdfj a;lskfj;aslkdfjaslkdjf aksjdhfkasjdhflkashdfkqjsdlfkjas asldfj alskdfjas da;lsdf",
        "",
        "asdflasdf",
    ]
)


@pytest.mark.parametrize(
    "screen_width, extra_width, extra_height, text, expected_width, expected_height",
    [
        (80, 2, 1, "hello world", len("hello world") + 2, 1 + 1),
        (10, 2, 1, "123456789012345", 10, 1 + 2),
        (10, 1, 2, "short\n1234567890123\nok", 10, 2 + 1 + 2 + 1),
        (10, 2, 1, "", 2, 1 + 1),
        (0, 3, 2, "hello", 0, 2 + 0),
        (40, 4, 5, LONG_TEXT, 40, 19),
        (80, 4, 5, "Some message some message\nSecond line\n", 29, 7),
        (
            80,
            4,
            5,
            "\n\n\n\n   \n\n \nSome message some message\nSecond line\n\n\n\n\n   \n          \n\n",
            29,
            7,
        ),
    ],
    ids=[
        "single_short_line",
        "long_line_wraps",
        "multiple_lines_mixed_wrapping",
        "empty_string",
        "zero_screen_width",
        "long_text_with_empty_lines",
        "single_trailing_newline",
        "leading_trailing_whitespace",
    ],
)
def test_optimal_message_view_size(
    screen_width, extra_width, extra_height, text, expected_width, expected_height
):
    width, height = optimal_message_view_size(
        screen_width, extra_width, extra_height, text
    )
    assert width == expected_width
    assert height == expected_height


def test_max_line_length_picks_longest_line():
    assert max_line_length("ab\nabcd\nabc") == 4


def test_max_line_length_counts_trailing_segment():
    assert max_line_length("a\n\nabcdef") == 6


def test_max_line_length_empty():
    assert max_line_length("") == 0


def test_max_line_length_counts_utf8_bytes():
    assert max_line_length("é") == 2


def test_num_lines_negative_width():
    assert num_lines("hello", -5) == 0


def test_num_lines_exact_multiple_of_width():
    assert num_lines("abcdef", 3) == 2


def test_num_lines_empty_counts_as_one():
    assert num_lines("   ", 10) == 1