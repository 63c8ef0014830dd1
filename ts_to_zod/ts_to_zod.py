import json
import logging
from pathlib import Path

import click

from .pipeline import GeneratorConfig, OutputMode, PipelineGenerator, ZodGenerationError


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--zod-alias", "-z", default=None, type=str, help="Identifier Zod is imported as")
@click.option("--keep-comments/--no-keep-comments", default=None, help="Re-emit JSDoc comments")
@click.option("--skip-parse-jsdoc", is_flag=True, default=False, help="Ignore JSDoc tags such as @format")
@click.option(
    "--skip-unsupported",
    is_flag=True,
    default=False,
    help="Skip declarations that cannot be converted instead of failing",
)
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def ts_to_zod(config, zod_alias, keep_comments, skip_parse_jsdoc, skip_unsupported, force, verbose, path, output):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # CLI flags override the config file
    if zod_alias is not None:
        config.zod_import_value = zod_alias
    if keep_comments is not None:
        config.keep_comments = keep_comments
    if skip_parse_jsdoc:
        config.skip_parse_jsdoc = True
    if skip_unsupported:
        config.skip_unsupported = True
    if force:
        config.output.mode = OutputMode.FORCE

    language = "tsx" if Path(path).suffix == ".tsx" else "typescript"
    codegen = PipelineGenerator(Path(path).read_text(encoding="utf-8"), config, language)

    try:
        codegen.write(output)
    except (ZodGenerationError, FileExistsError) as e:
        raise click.ClickException(str(e)) from e
