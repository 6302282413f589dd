# edgetrim

Removes a chosen set of characters from the start and the end of a string.

```python
from edgetrim.trim import trim

trim("xx--hello--xx", "x-")   # "hello"
trim("  padded  ", " ")       # "padded"
trim("keep me", None)         # "keep me"
trim("keep me")               # "keep me" (trim_chars defaults to None)
trim(None, " ")               # None
```

## Behaviour

`edgetrim.trim.trim(src, trim_chars=None)` works like this:

- If `src` is `None`, it returns `None`.
- If `trim_chars` is `None`, it returns `src` unchanged.
- In every other case it treats `trim_chars` as a set of characters. It strips leading characters that belong to the set until it meets one that does not, and does the same with trailing characters. It never touches characters in the middle of the string.
- A string made up only of characters from the set trims to `""`.
- An empty `trim_chars` removes nothing.

## Installation

```
pip install edgetrim
```

To run the tests, install the test extra and then run pytest:

```
pip install "edgetrim[test]"
pytest
```