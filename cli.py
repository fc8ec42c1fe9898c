import logging

import click

from config.constants import (
    PROMPT_LOAN_AMOUNT,
    PROMPT_ANNUAL_RATE,
    PROMPT_TERM_YEARS,
    PROMPT_INVALID_PREFIX,
    PROMPT_RUN_AGAIN,
    MSG_REPORT_SAVED,
)
from config.settings import LOG_FORMAT, REPORT_FILE
from core.amortization import LoanAmortization, summarize_schedule
from data_manager.data_validator import (
    validate_loan_amount,
    validate_annual_rate,
    validate_term_years,
    validate_loan_inputs,
    wants_another_report,
)

_LOG = logging.getLogger(__name__)

loan_options = [
    click.option('--principal', type=float, required=True, help='Loan amount'),
    click.option('--annual-rate', type=float, required=True, help='Annual interest rate as a decimal fraction (0.05 = 5%)'),
    click.option('--years', type=int, required=True, help='Loan term in years'),
]


def add_loan_options(func):
    for option in reversed(loan_options):
        func = option(func)
    return func


def _build_loan(principal, annual_rate, years) -> LoanAmortization:
    ok, msg = validate_loan_inputs(principal, annual_rate, years)
    if not ok:
        raise click.UsageError(msg)
    return LoanAmortization(principal, annual_rate, years)


def _prompt_value(text, value_type, validator):
    """Prompts until the validator accepts the value."""
    value = click.prompt(text, type=value_type)
    ok, msg = validator(value)
    while not ok:
        _LOG.debug("Rejected %r for %r: %s", value, text, msg)
        click.echo(msg, err=True)
        value = click.prompt(f"{PROMPT_INVALID_PREFIX} {text}", type=value_type)
        ok, msg = validator(value)
    return value


def _write_report(loan: LoanAmortization, output):
    try:
        return loan.save_report(output)
    except OSError as e:
        raise click.FileError(str(output), hint=e.strerror or str(e))


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """A CLI for loan amortization reports."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@cli.command()
@click.option('--output', '-o', type=click.Path(dir_okay=False), default=str(REPORT_FILE), show_default=True, help='Report file')
def report(output):
    """Interactively builds amortization reports until told to stop."""
    while True:
        principal = _prompt_value(PROMPT_LOAN_AMOUNT, float, validate_loan_amount)
        annual_rate = _prompt_value(PROMPT_ANNUAL_RATE, float, validate_annual_rate)
        years = _prompt_value(PROMPT_TERM_YEARS, int, validate_term_years)

        loan = LoanAmortization(principal, annual_rate, years)
        target = _write_report(loan, output)
        click.echo(MSG_REPORT_SAVED.format(filename=target))

        answer = click.prompt(PROMPT_RUN_AGAIN, default="N", show_default=False)
        if not wants_another_report(answer):
            break


@cli.command()
@add_loan_options
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Report file; prints to stdout when omitted')
def generate(principal, annual_rate, years, output):
    """Generates a single amortization report."""
    loan = _build_loan(principal, annual_rate, years)
    if output is None:
        click.echo(loan.generate_report(), nl=False)
        return
    target = _write_report(loan, output)
    click.echo(MSG_REPORT_SAVED.format(filename=target))


@cli.command()
@add_loan_options
def payment(principal, annual_rate, years):
    """Calculates the monthly payment and total interest."""
    loan = _build_loan(principal, annual_rate, years)
    summary = summarize_schedule(loan.schedule())
    click.echo(f"Monthly payment: {loan.monthly_payment:.2f}")
    click.echo(f"Number of payments: {loan.number_of_payments()}")
    click.echo(f"Total interest: {summary['total_interest']:.2f}")


@cli.command()
@add_loan_options
def schedule(principal, annual_rate, years):
    """Outputs the amortization schedule as CSV."""
    loan = _build_loan(principal, annual_rate, years)
    click.echo(loan.schedule().round(2).to_csv(index=False), nl=False)


if __name__ == "__main__":
    cli()
