"""CLI output utilities and formatting."""

from colorama import Fore, Style

BANNER = f"""
{Fore.YELLOW}╔══════════════════════════════════════╗{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}  {Fore.CYAN}{Style.BRIGHT}ggit{Style.RESET_ALL} - content-addressed staging     {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}╚══════════════════════════════════════╝{Style.RESET_ALL}
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


def find_repo_or_abort():
    """Locate the repository containing the working directory, or abort."""
    import click
    from ggit.core.errors import NotARepositoryError
    from ggit.core.repository import Repository

    try:
        return Repository.discover()
    except NotARepositoryError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()
