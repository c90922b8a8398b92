"""Print the shell function that lets `pr switch` change directory."""

import click

_POSIX_TEMPLATE = """\
ghws() {{
  local target
  target=$({prog} pr switch --shell "$@") || return
  [ -n "$target" ] && cd "$target"
}}
"""

_FISH_TEMPLATE = """\
function ghws
  set -l target ({prog} pr switch --shell $argv); or return
  test -n "$target"; and cd $target
end
"""

_TEMPLATES = {
    "bash": _POSIX_TEMPLATE,
    "zsh": _POSIX_TEMPLATE,
    "fish": _FISH_TEMPLATE,
}


def shell_function(shell, prog_name):
    return _TEMPLATES[shell].format(prog=prog_name)


@click.command("shell-init")
@click.argument(
    "shell", type=click.Choice(["bash", "zsh", "fish"]), required=False
)
@click.pass_context
def shell_init(ctx, shell):
    """Print the `ghws` shell function for switching worktrees."""
    if shell is None:
        click.echo("Print the ghws shell function.")
        click.echo()
        click.echo("Supported shells: bash, zsh, fish")
        click.echo()
        click.echo("To install, add to your shell config:")
        click.echo(f'  eval "$({ctx.find_root().info_name} shell-init zsh)"')
        return
    click.echo(shell_function(shell, ctx.find_root().info_name), nl=False)
