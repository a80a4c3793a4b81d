"""sem-version CLI"""

from pathlib import Path

import click

from sem_version import __version__
from sem_version.config import load_config, load_default, write_default_config
from sem_version.versioning import GitCommitSource, NextVersionManager
from sem_version.versioning.exceptions import (
    ConfigError,
    InvalidPatternError,
    VersionFormatError,
    VersioningError,
)
from sem_version.versioning.manager import STRATEGIES

from .debug import add_debug_option
from .error_formatting import pretty_print_pattern_error
from .utils.logging import logger


@click.command(
    name="sem-version", context_settings={"help_option_names": ["-h", "--help"]}
)
@click.version_option(__version__, prog_name="sem-version")
@click.option(
    "--prefix",
    default="v",
    show_default=True,
    envvar="SEM_VERSION_PREFIX",
    help="Version prefix.",
)
@click.option(
    "--no-prefix",
    is_flag=True,
    default=False,
    help="Output version without prefix.",
)
@click.option(
    "--path",
    "repo_path",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False),
    envvar="SEM_VERSION_PATH",
    help="Path to git repository.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    envvar="SEM_VERSION_CONFIG",
    help="Path to config file (default: auto-detect .sem-version.yaml).",
)
@click.option(
    "--tag-pattern",
    default="v*",
    show_default=True,
    help="Glob selecting release tags.",
)
@click.option(
    "--strategy",
    type=click.Choice(STRATEGIES, case_sensitive=False),
    default="rules",
    show_default=True,
    help="Match commits against the configured patterns (rules) or classify "
    "them as Conventional Commits (conventional).",
)
@click.option(
    "--suffixes/--no-suffixes",
    default=False,
    help="Keep prerelease and build metadata when the version is unchanged.",
)
@click.option(
    "--newline/--no-newline",
    default=True,
    help="Terminate the output with a newline.",
)
@click.option(
    "--init",
    "init_config",
    is_flag=True,
    default=False,
    help="Generate default config file.",
)
@click.pass_context
def cli(
    ctx,
    prefix,
    no_prefix,
    repo_path,
    config_path,
    tag_pattern,
    strategy,
    suffixes,
    newline,
    init_config,
):
    """
    Print the next semantic version of a git repository.

    Looks at the commits since the latest release tag and bumps major for
    breaking changes, minor for features and patch for fixes.
    """
    repo_path = Path(repo_path).resolve()

    if init_config:
        try:
            written = write_default_config(repo_path)
        except ConfigError as e:
            logger.error(f"Error generating config: {e}")
            ctx.exit(1)
        click.echo(f"Generated {written.name}")
        return

    try:
        if config_path:
            rule_set = load_config(config_path)
        else:
            rule_set = load_default(repo_path)
    except InvalidPatternError as e:
        logger.error(f"Error loading config: {pretty_print_pattern_error(e)}")
        ctx.exit(1)
    except ConfigError as e:
        logger.error(f"Error loading config: {e}")
        ctx.exit(1)

    try:
        source = GitCommitSource(repo_path, tag_pattern=tag_pattern)
        manager = NextVersionManager(
            source, rule_set=rule_set, strategy=strategy.lower()
        )
        version = manager.suggest_next_version()
    except VersionFormatError as e:
        logger.error(f"Error parsing version {e.version_string}: {e}")
        ctx.exit(1)
    except VersioningError as e:
        logger.error(f"Error: {e}")
        ctx.exit(1)

    rendered = version.render("" if no_prefix else prefix, include_suffixes=suffixes)
    click.echo(rendered, nl=newline)


add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
