"""
Text Preprocessor Module

Normalises raw corpus text into the word tokens the Markov chain is keyed on.

### Pipeline
1. **Lowercasing**: ASCII letters `A-Z` become `a-z`. Nothing else is case folded.
2. **Filtering**: only `a-z` and the space character survive. Digits,
   punctuation, newlines, tabs and every non-ASCII character are dropped in
   place, so `"hello\\nworld"` collapses into the single word `helloworld`.
3. **Splitting**: the filtered text is split on runs of spaces and empty
   pieces are discarded.

Every token produced matches `[a-z]+`, and running the pipeline over its own
output (joined with spaces) gives the same tokens back.

### Example Usage:

```python
from babbler.nlps.text_preprocessor import TextPreprocessor, tokenize

tokenize("Hello, world!")
# ['hello', 'world']

preprocessor = TextPreprocessor()
preprocessor.to_lowercase("Café OLÉ")
# 'café olÉ'
```
"""

import re

# ASCII-only case folding table; str.lower() would also fold non-ASCII letters
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")

_NON_LETTERS = re.compile(r"[^a-z ]+")


class TextPreprocessor:
    """
    Tokenizer for the word-level Markov chain.

    The individual steps are exposed so callers can inspect intermediate
    output; `tokenize` runs all of them.
    """

    def _as_text(self, text):
        """Coerce input to `str`. Bytes are read byte-wise, high bytes dropped."""
        if text is None:
            return ""
        if isinstance(text, (bytes, bytearray)):
            return bytes(text).decode("ascii", errors="ignore")
        return text

    def to_lowercase(self, text):
        """Fold `A-Z` to `a-z`, leaving every other character untouched."""
        return self._as_text(text).translate(_ASCII_LOWER)

    def remove_non_letters(self, text):
        """Drop everything except `a-z` and the space character."""
        return _NON_LETTERS.sub("", self._as_text(text))

    def split_words(self, text):
        """Split on runs of spaces, discarding empty pieces."""
        return [word for word in self._as_text(text).split(" ") if word]

    def tokenize(self, text):
        """
        Convert raw text into a list of word tokens.

        Args:
            text (str or bytes): The raw input text. `None` is treated as empty.

        Returns:
            list: Tokens in their original order, each matching `[a-z]+`.

        Example:
            >>> TextPreprocessor().tokenize("Hello, world! 123")
            ['hello', 'world']
        """
        text = self.to_lowercase(text)
        text = self.remove_non_letters(text)
        return self.split_words(text)


_default_preprocessor = TextPreprocessor()


def tokenize(text):
    """Tokenize `text` with the shared default preprocessor."""
    return _default_preprocessor.tokenize(text)
