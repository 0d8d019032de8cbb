from colorama import Fore, Style
from tslog.core.colors import ansi, plain, strip_ansi, wrap


def test_level_colors():
    assert ansi("x", "info") == f"{Fore.BLUE}x{Fore.RESET}"
    assert ansi("x", "warn") == f"{Fore.YELLOW}x{Fore.RESET}"
    assert ansi("x", "error") == f"{Fore.RED}x{Fore.RESET}"
    assert ansi("x", "debug") == f"{Style.RESET_ALL}x{Style.RESET_ALL}"


def test_unknown_color_is_plain():
    assert wrap("x", "chartreuse") == "x"
    assert wrap("x", "green") == "x"


def test_plain_and_strip():
    assert plain("x", "error") == "x"
    assert strip_ansi(wrap("hello", "blue") + wrap("!", "reset")) == "hello!"
