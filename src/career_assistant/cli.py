"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Prompt
from rich.table import Table

from career_assistant.config import load_config
from career_assistant.errors import CareerAssistantError
from career_assistant.jobs.catalog import recommend
from career_assistant.models.resume_input import ResumeInput
from career_assistant.parsers.resume_input import from_text, read_resume_file
from career_assistant.pipeline.assistant import CareerAssistant
from career_assistant.state.app_state import AppLanguage
from career_assistant.state.store import StateStore

app = typer.Typer(
    name="career-assistant",
    help="AI career assistant: resumes, ATS checks, skill gaps and mock interviews",
    no_args_is_help=True,
)
console = Console()


def _fail(exc: Exception) -> None:
    console.print(f"[red]{exc}[/red]")
    raise typer.Exit(1)


def _store() -> StateStore:
    return StateStore(load_config().storage.resolved_db_path)


def _assistant() -> CareerAssistant:
    return CareerAssistant.from_config(load_config())


def _run(coro, description: str):
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(description, total=None)
        return asyncio.run(coro)


async def _resume_input(file: Path | None, text: str | None) -> ResumeInput:
    if file is not None:
        return await read_resume_file(file)
    return from_text(text)


@app.command()
def resume(
    language: AppLanguage = typer.Option(None, "--language", "-l", help="Resume language"),
    output: Path = typer.Option(None, "--output", "-o", help="Output file path (.md)"),
) -> None:
    """Generate a Markdown resume from the saved profile."""
    store = _store()
    state = store.load()
    lang = (language or state.settings.language).value
    try:
        markdown = _run(_assistant().generate_resume(state.profile, lang), "Writing resume...")
    except CareerAssistantError as exc:
        _fail(exc)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(markdown, encoding="utf-8")
        console.print(f"[green]Resume saved: {output}[/green]")
    else:
        console.print(Markdown(markdown))


@app.command()
def parse(
    file: Path = typer.Option(None, "--file", "-f", help="Resume file (PDF/TXT)"),
    text: str = typer.Option(None, "--text", help="Resume text"),
    save: bool = typer.Option(False, "--save", help="Merge the result into the saved profile"),
) -> None:
    """Extract a structured profile from a resume."""
    assistant = _assistant()

    async def _parse():
        resume_input = await _resume_input(file, text)
        return await assistant.parse_resume_profile(resume_input)

    try:
        parsed = _run(_parse(), "Parsing resume...")
    except CareerAssistantError as exc:
        _fail(exc)

    console.print_json(parsed.model_dump_json(by_alias=True))
    if save:
        store = _store()
        state = store.load()
        state.merge_parsed_profile(parsed)
        store.save(state)
        console.print("[green]Profile updated.[/green]")


@app.command()
def ats(
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    file: Path = typer.Option(None, "--file", "-f", help="Resume file (PDF/TXT)"),
    text: str = typer.Option(None, "--text", help="Resume text"),
) -> None:
    """Score a resume against a job description."""
    if not jd.exists():
        console.print(f"[red]Job description file not found: {jd}[/red]")
        raise typer.Exit(1)
    jd_text = jd.read_text(encoding="utf-8")
    assistant = _assistant()

    async def _analyze():
        resume_input = await _resume_input(file, text)
        return await assistant.analyze_ats(resume_input, jd_text)

    try:
        result = _run(_analyze(), "Scanning resume...")
    except CareerAssistantError as exc:
        _fail(exc)

    color = "green" if result.score >= 70 else "yellow"
    console.print(
        Panel(
            f"[bold {color}]Score: {result.score:g}[/bold {color}]\n{result.summary}",
            title="ATS result",
        )
    )
    for title, items in (
        ("Missing keywords", result.missing_keywords),
        ("Formatting issues", result.formatting_issues),
        ("Suggestions", result.content_suggestions),
    ):
        if items:
            console.print(f"\n[yellow]{title}:[/yellow]")
            for item in items:
                console.print(f"  - {item}")


@app.command("skill-gap")
def skill_gap(
    role: str = typer.Option(None, "--role", "-r", help="Target role (defaults to profile)"),
    skills: str = typer.Option(None, "--skills", help="Comma separated skills (defaults to profile)"),
) -> None:
    """Compare your skills with a target role and plan a 4-week path."""
    profile = _store().load().profile
    target = role or profile.target_role
    current = [s.strip() for s in skills.split(",")] if skills else profile.skills
    try:
        result = _run(_assistant().analyze_skill_gap(current, target), "Analyzing skills...")
    except CareerAssistantError as exc:
        _fail(exc)

    console.print(Panel(f"Match score: {result.match_score:g}", title=target))
    console.print(f"[green]Strong:[/green] {', '.join(result.strong_skills) or '-'}")
    console.print(f"[yellow]Missing:[/yellow] {', '.join(result.missing_skills) or '-'}")

    table = Table(title="Learning path")
    table.add_column("Week")
    table.add_column("Topic")
    table.add_column("Action")
    table.add_column("Resources")
    for step in result.learning_path:
        table.add_row(str(step.week), step.topic, step.action_item, "\n".join(step.resources))
    console.print(table)


@app.command()
def interview(
    role: str = typer.Option(None, "--role", "-r", help="Role to interview for (defaults to profile)"),
) -> None:
    """Run a mock interview. Type 'quit' to finish."""
    profile = _store().load().profile
    session = _assistant().start_interview(profile.name, role or profile.target_role)
    console.print(Panel(session.turns[0].text, title="Interviewer"))

    async def _loop() -> None:
        while True:
            answer = await asyncio.to_thread(Prompt.ask, "[bold]You[/bold]")
            if answer.strip().lower() in ("quit", "exit"):
                break
            try:
                reply = await session.submit(answer)
            except CareerAssistantError as exc:
                console.print(f"[red]{exc}[/red]")
                continue
            console.print(Panel(Markdown(reply.text), title="Interviewer"))

    try:
        asyncio.run(_loop())
    finally:
        session.end()


@app.command()
def jobs(
    query: str = typer.Argument("", help="Filter by title or company"),
    save: str = typer.Option(None, "--save", help="Toggle a job id in saved jobs"),
) -> None:
    """List job recommendations ranked by skill match."""
    store = _store()
    state = store.load()
    if save:
        saved = state.toggle_saved_job(save)
        store.save(state)
        console.print(f"[green]Job {save} {'saved' if saved else 'removed'}.[/green]")

    table = Table(title="Job recommendations")
    for column in ("", "ID", "Title", "Company", "Location", "Salary", "Match"):
        table.add_column(column)
    for job in recommend(state.profile, query):
        marker = "*" if job.id in state.saved_jobs else ""
        table.add_row(
            marker, job.id, job.title, job.company, job.location, job.salary, f"{job.match_score}%"
        )
    console.print(table)


@app.command()
def profile(
    theme: bool = typer.Option(False, "--toggle-theme", help="Switch light/dark theme"),
    dyslexic: bool = typer.Option(False, "--toggle-dyslexic", help="Switch dyslexia-friendly font"),
    language: AppLanguage = typer.Option(None, "--language", "-l", help="Preferred language"),
    name: str = typer.Option(None, "--name", help="Set your name"),
    email: str = typer.Option(None, "--email", help="Set your email"),
    phone: str = typer.Option(None, "--phone", help="Set your phone number"),
    target_role: str = typer.Option(None, "--target-role", help="Set your target role"),
    skills: str = typer.Option(None, "--skills", help="Replace skills (comma separated)"),
) -> None:
    """Show the saved profile, edit its fields and update preferences."""
    store = _store()
    state = store.load()
    edits = {"name": name, "email": email, "phone": phone, "target_role": target_role}
    if skills is not None:
        edits["skills"] = [s.strip() for s in skills.split(",") if s.strip()]
    edited = any(v is not None for v in edits.values())
    if edited:
        state.edit_profile(**edits)
    if theme:
        state.toggle_theme()
    if dyslexic:
        state.toggle_dyslexic_mode()
    if language is not None:
        state.set_language(language)
    if edited or theme or dyslexic or language is not None:
        store.save(state)

    console.print_json(state.profile.model_dump_json(by_alias=True))
    console.print(f"[dim]{state.settings.model_dump_json()}[/dim]")


if __name__ == "__main__":
    app()
