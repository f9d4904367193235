"""
Interface de linha de comando (CLI) do avaliador de valores.
Usa Typer para uma experiência moderna e rica.
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from amount_expression.config.logging_config import setup_logging
from amount_expression.config.settings import get_settings
from amount_expression.core.models import AmountResult
from amount_expression.draft import AmountDraft
from amount_expression.pipeline import AmountPipeline

# Inicializa CLI
app = typer.Typer(
    name="amount-expression",
    help="Avalia expressões do campo de valor (ex: '10+5', '(20-3)*2', '7,50').",
    add_completion=False,
)

# Console Rico para output formatado
console = Console()


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Nível de log (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    """Configura logging a partir das settings."""
    settings = get_settings()
    setup_logging(
        level=log_level or settings.log_level,
        json_format=settings.log_json,
    )


@app.command("eval")
def evaluate(
    expression: str = typer.Argument(..., help="Expressão (ex: '10+5')"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Saída em formato JSON"),
):
    """
    Avalia uma expressão de valor.

    Exemplos:
        amount-expression eval "10+5"
        amount-expression eval "(20 - 3) * 2"
        amount-expression eval "7,50" --json
    """
    result = AmountPipeline().parse_amount_expression(expression)

    if json_output:
        console.print_json(result.model_dump_json())
    else:
        _display_result(result)

    if not result.ok:
        raise typer.Exit(code=1)


@app.command("batch")
def batch(
    input_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Arquivo com uma expressão por linha",
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Saída em formato JSON"),
):
    """
    Avalia todas as expressões de um arquivo.

    Linhas em branco são ignoradas.
    """
    try:
        lines = input_file.read_text(encoding="utf-8").splitlines()
    except UnicodeDecodeError as e:
        raise typer.BadParameter(
            f"Arquivo não está em UTF-8: {input_file.name}", param_hint="INPUT_FILE"
        ) from e

    expressions = [line for line in lines if line.strip()]

    pipeline = AmountPipeline()
    results = pipeline.process_batch(expressions)
    stats = pipeline.get_statistics(results)

    if json_output:
        output = {
            "results": [r.model_dump(mode="json") for r in results],
            "statistics": stats,
        }
        console.print_json(json.dumps(output, default=str))
        return

    _display_batch(results, stats)


@app.command("keypad")
def keypad(
    keys: list[str] = typer.Argument(..., help="Ids das teclas (ex: 1 0 + 5)"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Saída em formato JSON"),
):
    """
    Reproduz uma sequência de teclas na folha de valor e confirma.

    Exemplos:
        amount-expression keypad 1 0 + 5
        amount-expression keypad 7 . 5 del 0
    """
    draft = AmountDraft()

    try:
        draft.press_many(keys)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="KEYS") from e

    result = draft.confirm()

    if json_output:
        output = {"draft": draft.text, "result": result.model_dump(mode="json")}
        console.print_json(json.dumps(output, default=str))
    else:
        console.print(f"[bold]Rascunho:[/bold] {draft.text or '(vazio)'}")
        _display_result(result)

    if not result.ok:
        raise typer.Exit(code=1)


@app.command("version")
def version():
    """
    Exibe a versão do sistema.
    """
    from amount_expression import __version__

    console.print(f"[bold blue]Amount Expression[/bold blue] v{__version__}")
    console.print("Avaliador de expressões do campo de valor")


# FUNÇÕES DE DISPLAY

def _display_result(result: AmountResult):
    """Exibe um resultado formatado."""
    if result.ok:
        console.print(Panel(
            f"[bold]Expressão:[/bold] {result.raw}\n"
            f"[bold]Valor:[/bold] [green]{result.value:.2f}[/green]",
            title="✓ Valor aceito",
            border_style="green",
        ))
    else:
        console.print(Panel(
            f"[bold]Expressão:[/bold] {result.raw or '(vazio)'}\n"
            f"[bold]Erro:[/bold] [red]{result.message}[/red] ({result.error.value})",
            title="✗ Valor rejeitado",
            border_style="red",
        ))


def _display_batch(results: list[AmountResult], stats: dict):
    """Exibe resultados de lote formatados."""
    table = Table(title=f"{stats['total']} expressões avaliadas")
    table.add_column("#", style="dim", width=4)
    table.add_column("Expressão", style="white", overflow="fold")
    table.add_column("Valor", justify="right", style="green")
    table.add_column("Erro", style="red")

    for i, result in enumerate(results, 1):
        table.add_row(
            str(i),
            result.raw,
            f"{result.value:.2f}" if result.ok else "",
            result.message or "",
        )

    console.print(table)

    # Resumo
    summary = f"\n[bold]Resumo:[/bold] {stats['success']} aceitas, {stats['failed']} rejeitadas"
    if stats["amount_stats"]:
        summary += f" | Soma: [green]{stats['amount_stats']['sum']:.2f}[/green]"
    console.print(summary)


# ENTRY POINT

def main():
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
