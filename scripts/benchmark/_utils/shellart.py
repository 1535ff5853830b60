from termcolor import (
    colored,
)


def bold(txt: str, color: str = "white") -> str:
    return colored(txt, color, attrs=["bold"])
