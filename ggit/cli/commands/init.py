"""Initialize a new ggit repository."""

import click
from pathlib import Path
from ggit.core.repository import Repository
from ggit.cli.output import success, error, info


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new ggit repository.
    
    Creates a .ggit directory with the object database, refs skeleton,
    HEAD and config. Running it again in an existing repository changes
    nothing.
    
    Examples:
        ggit init                    # Initialize in current directory
        ggit init my-project         # Initialize in my-project directory
    """
    try:
        repo_path = Path(path).resolve()
        
        if not repo_path.exists():
            repo_path.mkdir(parents=True)
            click.echo(info(f"Created directory {repo_path}"))
        
        repo = Repository(repo_path)
        created = repo.init()
    except PermissionError:
        click.echo(error(f"Permission denied: Cannot create repository at {path}"), err=True)
        raise click.Abort()
    except OSError as e:
        click.echo(error(f"Failed to initialize repository: {e}"), err=True)
        raise click.Abort()
    
    if created:
        click.echo(success(f"Initialized empty ggit repository in {repo.ggit_dir}"))
    else:
        click.echo(info(f"Reinitialized existing ggit repository in {repo.ggit_dir}"))
