"""Solutions to the introductory exercises: conditionals, functions, strings, options."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    """True for even numbers."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Take 10 off an even price and 3 off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """Return num squared."""
    return num * num


def is_a_color_word(attempt: str) -> bool:
    """True for the colour words green, blue and red."""
    return attempt in ("green", "blue", "red")


def trim_me(text: str) -> str:
    """Remove spaces from both ends of a string."""
    return text.strip(" ")


def compose_me(text: str) -> str:
    """Add " world!" to the string."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace the first "cars" with "balloons"."""
    return text.replace("cars", "balloons", 1)


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at an hour of the day; None for an invalid hour."""
    if time_of_day > 23:
        return None
    return 5 if time_of_day < 22 else 0