"""Interactive CLI application."""
import logging
import random
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from maths_practice.config import load_settings
from maths_practice.dashboard import (
    get_operation_color, get_score_color, get_score_label, score_percentage,
)
from maths_practice.grading import format_answer, normalize_answer
from maths_practice.models import LEVELS, Operation, Question
from maths_practice.session import Session

logger = logging.getLogger(__name__)

console = Console()

EXIT_WORDS = ("q", "menu")

_MENU_KEYS = {
    "1": Operation.ADD,
    "2": Operation.SUBTRACT,
    "3": Operation.MULTIPLY,
    "4": Operation.DIVIDE,
}


class SessionExitRequested(Exception):
    """Raised when the user asks to leave a practice screen."""


def session_prompt(prompt: str, choices: Optional[list[str]] = None, **kwargs) -> str:
    if choices is not None:
        choices = [*choices, *EXIT_WORDS]
        kwargs["show_choices"] = False
    answer = Prompt.ask(prompt, choices=choices, **kwargs)
    if answer.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return answer


def session_int_prompt(prompt: str, choices: Optional[list[str]] = None, **kwargs) -> int:
    return int(session_prompt(prompt, choices=choices, **kwargs))


def resolve_operation(choice: str) -> Optional[Operation]:
    """Map a menu number, symbol or name (e.g. "1", "+", "add") to an Operation."""
    if choice in _MENU_KEYS:
        return _MENU_KEYS[choice]
    try:
        return Operation.parse(choice)
    except ValueError:
        return None


def show_welcome():
    console.print(Panel(
        "[bold]Maths Practice[/bold]\n[dim]Addition, subtraction, multiplication and division drills[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu(session: Session):
    mode = "Decimals enabled (0.1)" if session.decimal_mode else "Whole numbers only"
    console.print("\n[bold]Choose an operation to practice:[/bold] [dim](number, symbol or name)[/dim]")
    for key, op in _MENU_KEYS.items():
        color = get_operation_color(op)
        console.print(f"  [{color}]{key}[/{color}]  {op.value}  {op.label}")
    console.print(f"  [cyan]d[/cyan]  Toggle decimals [dim]({mode})[/dim]")
    console.print("  [cyan]quit[/cyan]  Exit")


def choose_level(operation: Operation) -> int:
    color = get_operation_color(operation)
    console.print(f"\n[bold {color}]{operation.label}[/bold {color}]: choose your level")
    console.print("  " + "  ".join(f"1 to {lvl}" for lvl in LEVELS))
    return session_int_prompt("Level", choices=[str(lvl) for lvl in LEVELS])


def render_score(session: Session) -> None:
    score = session.compute_score()
    pct = score_percentage(score)
    color = get_score_color(pct)
    summary = (
        f"[green]{score.correct} ✓[/green]  [red]{score.incorrect} ✗[/red]  "
        f"[bold]{score.total}[/bold] answered"
    )
    if score.total:
        summary += f"  [{color}]{pct}% {get_score_label(pct)}[/{color}]"
    console.print(summary)


def render_set(session: Session) -> None:
    active = session.current_set
    if active is None:
        return
    color = get_operation_color(session.operation)
    table = Table(
        title=f"Set {session.current_set_index + 1} of {len(session.question_sets)}",
        border_style=color,
    )
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Question", justify="right")
    table.add_column("Answer", justify="center")
    table.add_column("")
    for i, q in enumerate(active.questions, 1):
        if not q.is_answered:
            mark = ""
        elif q.is_correct:
            mark = "[green]✓[/green]"
        else:
            mark = f"[red]✗[/red] [dim]{format_answer(q.correct_answer)}[/dim]"
        table.add_row(str(i), q.prompt, q.user_answer or "[dim]?[/dim]", mark)
    console.print(table)


def answer_question(session: Session, number: int, text: str) -> Optional[Question]:
    """Submit an answer for the n-th question (1-based) of the active set."""
    active = session.current_set
    if active is None or not 1 <= number <= len(active.questions):
        console.print("[red]No such question.[/red]")
        return None
    question = active.questions[number - 1]
    if question.is_answered:
        console.print("[yellow]Already answered. Use 'r' to reset answers.[/yellow]")
        return None
    answer = normalize_answer(text)
    if not answer:
        return None
    graded = session.submit_answer(question.id, answer)
    if graded is None:
        return None
    if graded.is_correct:
        console.print("[green]Correct![/green]")
    else:
        console.print(f"[red]Incorrect.[/red] Answer: [green]{format_answer(graded.correct_answer)}[/green]")
    return graded


def handle_practice_command(session: Session, command: str) -> None:
    parts = command.split(maxsplit=1)
    if not parts:
        return
    head = parts[0].lower()
    if head == "n":
        session.next_batch()
    elif head == "p":
        if not session.advance_to_previous_batch():
            console.print("[yellow]Already at the first set.[/yellow]")
    elif head == "r":
        session.reset_answers_in_history()
        console.print("[dim]Answers cleared.[/dim]")
    elif head.isdigit():
        text = parts[1] if len(parts) > 1 else session_prompt(f"Answer for question {head}")
        answer_question(session, int(head), text)
    else:
        console.print("[red]Unknown command. Try again.[/red]")


def run_practice(session: Session) -> None:
    if not session.question_sets:
        session.generate_batch()
    while True:
        console.print()
        render_set(session)
        render_score(session)
        console.print(
            "[dim]'<n> <answer>' to answer, 'n' next set, 'p' previous set, "
            "'r' reset answers, 'q' back to menu[/dim]"
        )
        handle_practice_command(session, session_prompt("[bold]>[/bold]", default=""))


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    rng = random.Random(settings.seed) if settings.seed is not None else None
    session = Session(rng=rng)
    session.configure_decimal_mode(settings.decimal_mode)

    show_welcome()

    while True:
        show_menu(session)
        choice = Prompt.ask("\n[bold]>[/bold]", default="1").strip().lower()
        try:
            if choice == "d":
                session.configure_decimal_mode(not session.decimal_mode)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]Keep practising![/dim]")
                break
            else:
                operation = resolve_operation(choice)
                if operation is None:
                    console.print("[red]Unknown command. Try again.[/red]")
                else:
                    session.start(operation, choose_level(operation))
                    run_practice(session)
        except SessionExitRequested:
            console.print("[dim]Back to the menu.[/dim]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            logger.exception("unexpected error")
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
