"""CLI output utilities and formatting."""

from colorama import Fore, Style

BANNER = f"""
{Fore.GREEN}{Style.BRIGHT}   ___ _ __ _____   _____ {Style.RESET_ALL}
{Fore.GREEN}{Style.BRIGHT}  / _ `| '__/ _ \\ \\ / / _ \\{Style.RESET_ALL}
{Fore.GREEN}{Style.BRIGHT} | (_| | | | (_) \\ V /  __/{Style.RESET_ALL}
{Fore.GREEN}{Style.BRIGHT}  \\__, |_|  \\___/ \\_/ \\___|{Style.RESET_ALL}
{Fore.GREEN}{Style.BRIGHT}  |___/{Style.RESET_ALL}
   {Fore.WHITE}A content-addressed version control system{Style.RESET_ALL}
"""


def success(message: str) -> str:
    """Format success message in green."""
    return f"{Fore.GREEN}✓ {message}{Style.RESET_ALL}"


def info(message: str) -> str:
    """Format info message in cyan."""
    return f"{Fore.CYAN}→ {message}{Style.RESET_ALL}"


def warning(message: str) -> str:
    """Format warning message in yellow."""
    return f"{Fore.YELLOW}⚠ {message}{Style.RESET_ALL}"


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def colorize(text: str, color: str, enabled: bool = True) -> str:
    """Wrap text in a colorama color when enabled."""
    if not enabled:
        return text
    return f"{color}{text}{Style.RESET_ALL}"
