"""Plumbing commands - inspect the object store and index directly."""

import click
from ggit.core.errors import GgitError
from ggit.core.hash import OBJECT_TYPES, hash_object
from ggit.core.index import Index
from ggit.cli.output import error, find_repo_or_abort


@click.command('hash-object')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('-w', '--write', is_flag=True, help='Write the object into the object store')
@click.option('-t', '--type', 'obj_type', type=click.Choice(OBJECT_TYPES), default='blob',
              help='Object type (default: blob)')
def hash_object_cmd(file, write, obj_type):
    """
    Compute the object id of a file's content.

    Examples:
        ggit hash-object file.txt      # Print the id
        ggit hash-object -w file.txt   # Print the id and store the content
    """
    with open(file, 'rb') as f:
        data = f.read()
    obj_id = hash_object(data, obj_type)

    if write:
        repo = find_repo_or_abort()
        try:
            repo.objects.put(obj_id, data, obj_type)
        except (GgitError, OSError) as e:
            click.echo(error(f"Failed to write object: {e}"), err=True)
            raise click.Abort()

    click.echo(obj_id)


@click.command('cat-file')
@click.argument('object_id')
@click.option('-p', '--pretty', is_flag=True, help='Print object content (default)')
@click.option('-s', '--size', is_flag=True, help='Print object size')
@click.option('-e', '--exists', is_flag=True,
              help='Exit with 0 if the object exists, 1 otherwise')
def cat_file_cmd(object_id, pretty, size, exists):
    """
    Provide content or size information for stored objects.

    Abbreviated ids of at least 4 characters are accepted.

    Examples:
        ggit cat-file -p abc1234       # Show content
        ggit cat-file -s abc1234       # Show size in bytes
        ggit cat-file -e abc1234       # Test existence
    """
    repo = find_repo_or_abort()
    store = repo.objects

    try:
        full_id = store.resolve_prefix(object_id)
    except GgitError as e:
        if exists:
            raise click.exceptions.Exit(1)
        click.echo(error(str(e)), err=True)
        raise click.Abort()

    if exists:
        return

    blob = store.read(full_id)
    if size:
        click.echo(len(blob))
        return

    stdout = click.get_binary_stream('stdout')
    stdout.write(blob.data)
    stdout.flush()


@click.command('ls-files')
@click.option('-s', '--stage', is_flag=True, help='Show mode, object id and entry type')
def ls_files_cmd(stage):
    """
    Show files in the index.

    Examples:
        ggit ls-files                  # Paths only
        ggit ls-files -s               # Full index records
    """
    repo = find_repo_or_abort()

    index = Index()
    try:
        index.read(repo.index_file)
    except GgitError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()

    for entry in index:
        if stage:
            click.echo(f"{entry.mode:o} {entry.sha1} {entry.entry_type}\t{entry.path}")
        else:
            click.echo(entry.path)


@click.command('count-objects')
@click.option('-v', '--verbose', is_flag=True, help='Check every object while counting')
def count_objects_cmd(verbose):
    """
    Count objects in the object store.

    With -v every object is re-hashed and corrupt ones are reported.

    Examples:
        ggit count-objects
        ggit count-objects -v
    """
    repo = find_repo_or_abort()
    store = repo.objects

    total_objects = 0
    total_size = 0
    corrupt = []

    for obj_id in store.iter_ids():
        total_objects += 1
        total_size += store.object_path(obj_id).stat().st_size
        if verbose:
            try:
                store.verify(obj_id)
            except GgitError as e:
                corrupt.append((obj_id, str(e)))

    size_kb = total_size / 1024
    click.echo(f"{total_objects} objects, {size_kb:.2f} KB")

    if corrupt:
        for obj_id, reason in corrupt:
            click.echo(error(f"{obj_id}: {reason}"), err=True)
        raise click.exceptions.Exit(1)
