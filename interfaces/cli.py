"""
Command-line interface for the Black-76 pricing engine.

This CLI provides access to:
- Raw request dispatch (hex in, hex out)
- Pricing from human-readable inputs
- Host gas accounting
"""

import logging
import math

import click

from black76.codec.fixed_point import encode_int
from black76.diagnostics.arbitrage import check_price_bounds
from black76.protocol.dispatcher import (
    SELECTORS,
    compute,
    decode_response,
    encode_request,
    required_gas,
)

OUTPUT_LABELS = {
    "prices_delta": ["Call price", "Put price", "Call delta"],
    "prices": ["Call price", "Put price"],
    "delta": ["Call delta"],
}


def _finite(ctx, param, value):
    if value is not None and not math.isfinite(value):
        raise click.BadParameter(f"must be a finite number, got {value}")
    return value


def _parse_hex(ctx, param, value):
    try:
        return bytes.fromhex(value.removeprefix("0x"))
    except ValueError as e:
        raise click.BadParameter(f"not a hex string: {e}") from e


@click.group()
@click.version_option(version="1.0.0")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Black-76 Pricing Engine - fixed-point forward option pricing."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command(name="compute")
@click.argument("request", callback=_parse_hex)
def compute_cmd(request):
    """Dispatch a hex-encoded request and print the hex response."""
    result = compute(request)
    if not result.success:
        click.echo(f"Error: {result.error.name} (code {result.code})", err=True)
        raise SystemExit(result.code)
    click.echo(result.output.hex())


@cli.command()
@click.option("--forward", "-F", type=click.FloatRange(min=0.0), callback=_finite, required=True, help="Forward price")
@click.option("--strike", "-K", type=click.FloatRange(min=0.0), callback=_finite, required=True, help="Strike price")
@click.option("--vol", "-v", type=click.FloatRange(min=0.0), callback=_finite, required=True, help="Volatility (annualized)")
@click.option(
    "--expiry-seconds", "-t", type=click.IntRange(0, 2**32 - 1), required=True,
    help="Seconds to expiry",
)
@click.option("--discount", "-D", type=click.FloatRange(min=0.0), callback=_finite, default=1.0, help="Discount factor")
@click.option("--exponent", "-e", type=click.IntRange(-128, 127), default=18, help="Decimal exponent")
@click.option("--operation", "-o", type=click.Choice(sorted(SELECTORS)), default="prices_delta")
def price(forward, strike, vol, expiry_seconds, discount, exponent, operation):
    """Price a forward option from decimal inputs."""
    try:
        request = encode_request(
            operation,
            expiry_seconds=expiry_seconds,
            discount=encode_int(discount, exponent),
            volatility=encode_int(vol, exponent),
            forward=encode_int(forward, exponent),
            strike=encode_int(strike, exponent),
            exponent=exponent,
        )
    except ValueError as e:
        click.echo(f"\nError: {e}", err=True)
        raise SystemExit(1)

    result = compute(request)
    if not result.success:
        click.echo(f"\nError: {result.error.name} (code {result.code})", err=True)
        raise SystemExit(result.code)

    values = decode_response(result.output, exponent)
    click.echo(f"\nBlack-76 {operation}:")
    for label, value in zip(OUTPUT_LABELS[operation], values):
        click.echo(f"  {label + ':':<12} {value:>14.6f}")

    if operation == "delta":
        return

    check = check_price_bounds(values[0], values[1], forward, strike, discount)
    if check.is_valid:
        click.echo("\nNo-arbitrage bounds: OK")
    else:
        click.echo("\nNo-arbitrage bounds violated:")
        for violation in check.violations:
            click.echo(f"  - {violation}")


@cli.command()
@click.argument("request", callback=_parse_hex)
def gas(request):
    """Print the host accounting cost of a request."""
    click.echo(required_gas(request))


if __name__ == "__main__":
    cli()
