"""
E-Invoice Readiness Checker — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action (assessment, field check, interactive questionnaire).
  5. Report result to stdout.

Install and run::

    pip install -e .
    einvoice-checker --help
    einvoice-checker validate-config
    einvoice-checker classify --revenue-2024 6000000 --revenue-2025 0
    einvoice-checker classify --pre-business --revenue-2024 0 \\
        --revenue-2025 400000 --commencement-year 2025 --json
    einvoice-checker validate-field email test@example.com
    einvoice-checker questionnaire
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="einvoice-checker",
    help="E-Invoice Readiness Checker — find your e-invoicing category and deadline.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from einvoice_checker.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from einvoice_checker.utils.logging import configure_logging
    configure_logging(config.logging)


def _echo_errors(errors) -> None:
    from einvoice_checker.reporting.formatters import format_field_errors

    text = format_field_errors(errors)
    if text:
        typer.echo(text, err=True)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)
    q = config.questionnaire

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Default commencement year: {q.default_commencement_year}")
    typer.echo(f"  Default current year:      {q.default_current_year}")
    typer.echo(
        f"  Commencement years:        {q.commencement_year_start}-{q.commencement_year_end}"
    )
    typer.echo(f"  Current years:             {q.current_year_start}-{q.current_year_end}")
    typer.echo(f"  Results dir:               {config.output.results_dir}")
    typer.echo(f"  Log level:                 {config.logging.level}")
    typer.echo(f"  Debug mode:                {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("classify")
def classify(
    revenue_2024: Optional[str] = typer.Option(
        None, "--revenue-2024", help="Annual revenue for 2024 in RM.",
    ),
    revenue_2025: Optional[str] = typer.Option(
        None, "--revenue-2025", help="Projected first-year (2025) revenue in RM.",
    ),
    commencement_year: Optional[str] = typer.Option(
        None,
        "--commencement-year",
        help="Year the business commenced or will commence (default from config).",
    ),
    pre_business: bool = typer.Option(
        False, "--pre-business", help="Business has not commenced operations yet.",
    ),
    current_year: Optional[str] = typer.Option(
        None,
        "--current-year",
        help="Reference year; January 1 of it is treated as today (default from config).",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the result as JSON instead of a table.",
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Also write the JSON result to this file.",
    ),
    save: bool = typer.Option(
        False, "--save", help="Also save the JSON result into output.results_dir.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Classify a business and report its e-invoice deadline.

    Every field is validated first (same rules as the questionnaire);
    exits with code 1 and lists the problems if any field fails.
    """
    from einvoice_checker.engine.assessment import run_assessment
    from einvoice_checker.flow.questionnaire import STEP_FIELDS, FormData, QuestionStep
    from einvoice_checker.reporting.export import (
        assessment_to_record,
        export_to_json,
        save_assessment_record,
    )
    from einvoice_checker.reporting.formatters import format_result_bundle
    from einvoice_checker.utils.number_utils import parse_int
    from einvoice_checker.validation.validator import validate_fields

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    q = config.questionnaire

    form = FormData(
        annual_revenue_2024=revenue_2024,
        annual_revenue_2025=revenue_2025,
        business_commencement_year=commencement_year or str(q.default_commencement_year),
        is_pre_business=pre_business,
        current_year=current_year or str(q.default_current_year),
    )
    fields = STEP_FIELDS[QuestionStep.REVENUE] + STEP_FIELDS[QuestionStep.BUSINESS_INFO]
    is_valid, errors = validate_fields(form.field_values(), fields)
    if not is_valid:
        typer.echo("[ERROR] Invalid input:", err=True)
        _echo_errors(errors)
        raise typer.Exit(code=1)

    year = parse_int(form.current_year)
    assessment = run_assessment(form.to_business_inputs(), current_year=year)
    record = assessment_to_record(assessment, current_year=year)

    if as_json:
        typer.echo(json.dumps(record, indent=2, ensure_ascii=False))
    else:
        typer.echo(format_result_bundle(assessment.bundle))

    if output:
        written = export_to_json(record, Path(output))
        typer.echo(f"[OK] Result written to: {written}", err=True)

    if save:
        saved = save_assessment_record(record, Path(config.output.results_dir))
        typer.echo(f"[OK] Result saved to: {saved}", err=True)


@app.command("validate-field")
def validate_field_command(
    field_name: str = typer.Argument(..., help="Form field name, e.g. annualRevenue2024."),
    value: str = typer.Argument(..., help="Raw value to check."),
) -> None:
    """Check one raw value against its field's validation rule.

    Exits with code 1 if the value is invalid.  Fields without a rule
    always pass.
    """
    from einvoice_checker.validation.validator import validate_field

    verdict = validate_field(field_name, value)
    if verdict.is_valid:
        suffix = "" if verdict.checked else " (no rule for this field)"
        typer.echo(f"[OK] {field_name}: valid{suffix}")
        return

    typer.echo(f"[INVALID] {field_name}: {verdict.error} ({verdict.kind})")
    raise typer.Exit(code=1)


@app.command("questionnaire")
def questionnaire(
    skip_newsletter: bool = typer.Option(
        False, "--skip-newsletter", help="Stop after showing the results.",
    ),
    config_path: Optional[str] = typer.Option(
        None, "--config", help="Path to TOML config file.",
    ),
) -> None:
    """Walk through the questionnaire interactively.

    \b
      Step 1  Annual Revenue
      Step 2  Business Information
      Step 3  Your E-Invoice Requirements
      Step 4  Stay Updated (newsletter, optional)
    """
    from einvoice_checker.flow.questionnaire import (
        STEP_TITLES,
        QuestionStep,
        advance,
        commencement_year_options,
        current_year_options,
        new_questionnaire,
        next_label,
        progress_label,
        submit_newsletter,
        update_field,
    )
    from einvoice_checker.reporting.formatters import format_result_bundle

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    q = config.questionnaire

    state = new_questionnaire(q)
    while True:
        step = state.current_step
        typer.echo("")
        typer.echo(f"--- {progress_label(step)}: {STEP_TITLES[step]} ---")

        if step == QuestionStep.REVENUE:
            for name, text in (
                ("annualRevenue2024", "Annual revenue for 2024 (RM)"),
                ("annualRevenue2025", "Projected first-year revenue (RM)"),
            ):
                raw = typer.prompt(text, default="", show_default=False)
                state, _ = update_field(state, name, raw)

        elif step == QuestionStep.BUSINESS_INFO:
            years = commencement_year_options(q)
            raw = typer.prompt(
                f"Business commencement year ({years[0]}-{years[-1]})",
                default=str(state.form_data.business_commencement_year),
            )
            state, _ = update_field(state, "businessCommencementYear", raw)
            pre = typer.confirm("Has the business NOT commenced yet?", default=False)
            state, _ = update_field(state, "isPreBusiness", pre)
            years = current_year_options(q)
            raw = typer.prompt(
                f"Current year ({years[0]}-{years[-1]})",
                default=str(state.form_data.current_year),
            )
            state, _ = update_field(state, "currentYear", raw)

        elif step == QuestionStep.RESULTS:
            typer.echo(format_result_bundle(state.results))
            if skip_newsletter or not typer.confirm(f"{next_label(step)}?", default=False):
                return

        else:
            for name, text in (
                ("email", "Email"),
                ("businessName", "Business name (optional)"),
                ("phone", "Phone (optional)"),
            ):
                raw = typer.prompt(text, default="", show_default=False)
                state, _ = update_field(state, name, raw)
            consent = typer.confirm("May we send you marketing updates?", default=False)
            state, _ = update_field(state, "marketingConsent", consent)

            outcome = submit_newsletter(state)
            state = outcome.state
            if outcome.is_valid:
                typer.echo("Thank You! You have successfully subscribed to the newsletter.")
                return
            _echo_errors(state.errors)
            continue

        outcome = advance(state)
        state = outcome.state
        if not outcome.is_valid:
            _echo_errors(state.errors)


if __name__ == "__main__":
    app()
