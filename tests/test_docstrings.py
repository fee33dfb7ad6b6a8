import doctest

import pytest

import _stendhalio.reading
import _stendhalio.token_list
import _stendhalio.tokenizer.errors
import _stendhalio.tokenizer.stendhal_tokenizer


@pytest.mark.parametrize(
    "module",
    [
        _stendhalio.reading,
        _stendhalio.token_list,
        _stendhalio.tokenizer.errors,
        _stendhalio.tokenizer.stendhal_tokenizer,
    ],
)
def test_docstring_examples(module):
    assert doctest.testmod(module).failed == 0
