import io
from unittest.mock import Mock

import pytest

from my_copy import prompt as tested
from my_copy.constants import INVALID_INPUT_MESSAGE, OVERWRITE_PROMPT


def _ask(answers):
    if isinstance(answers, str):
        answers = answers.encode()

    out = io.StringIO()
    res = tested.ask_overwrite(input_stream=io.BytesIO(answers), output_stream=out)
    return res, out.getvalue()


@pytest.mark.parametrize("answer", ["y", "Y"])
def test_ask_overwrite__yes(answer):
    res, output = _ask(answer)
    assert res is True
    assert output == OVERWRITE_PROMPT


@pytest.mark.parametrize("answer", ["n", "N"])
def test_ask_overwrite__no(answer):
    res, output = _ask(answer)
    assert res is False
    assert output == OVERWRITE_PROMPT


def test_ask_overwrite__end_of_input():
    res, output = _ask("")
    assert res is False
    assert output == OVERWRITE_PROMPT


def test_ask_overwrite__invalid_then_yes():
    res, output = _ask("xy")
    assert res is True
    assert output == OVERWRITE_PROMPT + INVALID_INPUT_MESSAGE + "\n" + OVERWRITE_PROMPT


def test_ask_overwrite__newline_is_invalid():
    res, output = _ask("q\nn")
    assert res is False
    assert output.count(OVERWRITE_PROMPT) == 3
    assert output.count(INVALID_INPUT_MESSAGE) == 2


def test_ask_overwrite__only_first_character_consumed():
    stream = io.BytesIO(b"yes")
    assert tested.ask_overwrite(input_stream=stream, output_stream=io.StringIO()) is True
    assert stream.read() == b"es"


def test_ask_overwrite__invalid_then_end_of_input():
    res, output = _ask("abc")
    assert res is False
    assert output.count(OVERWRITE_PROMPT) == 4
    assert output.count(INVALID_INPUT_MESSAGE) == 3


def test_ask_overwrite__read_error():
    stream = Mock()
    stream.read.side_effect = OSError("read error")

    assert tested.ask_overwrite(input_stream=stream, output_stream=io.StringIO()) is False


def test_ask_overwrite__undecodable_byte_is_invalid():
    res, output = _ask(b"\xffy")
    assert res is True
    assert output.count(OVERWRITE_PROMPT) == 2
    assert output.count(INVALID_INPUT_MESSAGE) == 1


def test_ask_overwrite__multibyte_character_is_one_answer_per_byte():
    res, output = _ask("éy".encode())
    assert res is True
    assert output.count(OVERWRITE_PROMPT) == 3
    assert output.count(INVALID_INPUT_MESSAGE) == 2
