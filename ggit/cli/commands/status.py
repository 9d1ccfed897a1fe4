"""Status command - show working tree status."""

import click
from colorama import Fore, Style
from ggit.core.errors import GgitError
from ggit.operations.status import collect_status
from ggit.cli.output import success, error, info, find_repo_or_abort


@click.command('status')
def status_cmd():
    """
    Show the working tree status.
    
    Displays:
    - Files staged in the index
    - Staged files changed or deleted since they were added
    - Untracked files (not in the index)
    
    Examples:
        ggit status
    """
    repo = find_repo_or_abort()
    
    try:
        report = collect_status(repo)
    except (GgitError, OSError) as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()
    
    if report.branch:
        click.echo(f"On branch {Fore.CYAN}{report.branch}{Style.RESET_ALL}")
    else:
        click.echo(f"{Fore.YELLOW}HEAD detached{Style.RESET_ALL}")
    click.echo()
    click.echo("No commits yet")
    click.echo()
    
    if report.staged:
        click.echo(Fore.GREEN + "Changes to be committed:" + Style.RESET_ALL)
        click.echo()
        for path in report.staged:
            click.echo(f"  {Fore.GREEN}new file:   {path}{Style.RESET_ALL}")
        click.echo()
    
    if report.modified or report.deleted:
        click.echo(Fore.YELLOW + "Changes not staged for commit:" + Style.RESET_ALL)
        click.echo(info("  (use \"ggit add <file>...\" to update what will be committed)"))
        click.echo()
        for path in report.modified:
            click.echo(f"  {Fore.YELLOW}modified:   {path}{Style.RESET_ALL}")
        for path in report.deleted:
            click.echo(f"  {Fore.YELLOW}deleted:    {path}{Style.RESET_ALL}")
        click.echo()
    
    if report.untracked:
        click.echo(Fore.RED + "Untracked files:" + Style.RESET_ALL)
        click.echo(info("  (use \"ggit add <file>...\" to include in what will be committed)"))
        click.echo()
        for path in report.untracked:
            click.echo(f"  {Fore.RED}{path}{Style.RESET_ALL}")
        click.echo()
    
    if not report.staged and report.clean:
        click.echo(success("Nothing to commit (create/copy files and use \"ggit add\" to track)"))
