"""
Example usage of interviewer.

Prompts for a name, an age, a list of floats and a list of quoted words.
"""

from interviewer import Separator, ask, ask_many, ask_many_until, ask_until, set_consumable_quotes
from interviewer.core import ConversionError


def main() -> None:
    """Run an interactive interviewer session."""
    # Example 1: retry until a value is given
    name = ask_until("Enter your name: ")

    # Example 2: single strict read with a fallback
    try:
        age = ask("Enter your age: ", "u8")
    except ConversionError as exc:
        print(f"  {exc}, using 0")
        age = 0
    print(f"Hello, {name}! You are {age} years old.")
    print()

    # Example 3: several values on one line, re-asked until all parse
    floats = ask_many_until("Enter some floats (1, 2.5, 3): ", float, Separator.sequence_trim(","))
    print(f"  Floats: {floats}")
    print()

    # Example 4: quoted words stay together
    set_consumable_quotes(True)
    words = ask_many('Enter some words (a "b c d" e): ')
    print(f"  Words: {words}")


if __name__ == "__main__":
    main()
