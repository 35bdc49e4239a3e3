"""String hashing used to turn text seeds into integer seeds."""

from .constants import STRING_HASH_START, UINT32_MASK


def string_hash(text: str) -> int:
    """Hash a string into an unsigned 32-bit integer.

    This is the djb2-xor variant published as the ``string-hash`` package:
    starting from 5381, each UTF-16 code unit is folded in from the end of
    the string with ``hash = (hash * 33) ^ unit``. Working on UTF-16 code
    units (rather than code points) keeps seeds interchangeable with tools
    that hash JavaScript strings.

    Args:
        text: String to hash

    Returns:
        Integer in the range [0, 2**32)

    Examples:
        >>> string_hash("")
        5381
        >>> string_hash("a")
        177604
    """
    data = text.encode("utf-16-le", "surrogatepass")
    value = STRING_HASH_START
    for i in range(len(data) - 2, -1, -2):
        unit = data[i] | (data[i + 1] << 8)
        value = ((value * 33) ^ unit) & UINT32_MASK
    return value
