from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from americanise.dictionary import DictionaryLoadError
from americanise.transform import StreamError

from .config import load_config, validate_config
from .pipeline import FileOpenError, PathCollisionError, run

USAGE = "usage: {prog} [<]infile.txt [>]outfile.txt"

# stdout may be the output sink, so every message goes to stderr
err_console = Console(stderr=True, soft_wrap=True)

app = typer.Typer(help="Replace British spellings with American ones", add_completion=False)

def _usage(ctx: typer.Context, value: bool):
    if not value:
        return
    prog = ctx.find_root().info_name or "americanise"
    err_console.print(escape(USAGE.format(prog=prog)))
    raise typer.Exit(1)

def _fail(message: str):
    err_console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(1)

@app.command(context_settings={"help_option_names": []})
def main(
    infile: Optional[str] = typer.Argument(None, help="Input text file (default: stdin)"),
    outfile: Optional[str] = typer.Argument(None, help="Output text file (default: stdout)"),
    dictionary: Optional[str] = typer.Option(None, "--dictionary", "-d", help="British-American dictionary file"),
    encoding: Optional[str] = typer.Option(None, "--encoding", help="Text encoding of input, output and dictionary"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print a summary to stderr"),
    show_usage: bool = typer.Option(False, "-h", "--help", is_eager=True, expose_value=False, callback=_usage),
):
    cfg = load_config(dictionary_path=dictionary, encoding=encoding)
    try:
        validate_config(cfg)
    except RuntimeError as e:
        _fail(str(e))
    try:
        stats = run(cfg, infile, outfile)
    except (PathCollisionError, DictionaryLoadError, FileOpenError, StreamError) as e:
        _fail(str(e))
    except OSError as e:
        _fail(f"I/O error: {e}")
    if verbose:
        err_console.print(
            f"[cyan]{stats.lines} lines, {stats.words} words, "
            f"{stats.replacements} replaced[/cyan]"
        )

if __name__ == "__main__":
    app()
