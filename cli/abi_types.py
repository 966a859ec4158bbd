"""
Command line interface to the hex codec and the fixed-size integer types.
"""

import logging

import click

from abi_hex import Exact, Expanded, HexError, Unbounded, decode, decode_expanded, encode
from abi_numeric import Kind, OutOfRangeError, conversion_table, format_table
from abi_numeric import integer_type as get_integer_type
from config import EnvConfig
from config.log import setup_logger

logger = logging.getLogger(__name__)


@click.group("abi_types", context_settings=dict(help_option_names=["-h", "--help"]))
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def abi_types(ctx: click.Context, verbose: bool):
    """
    Encode and decode ABI integers and hex strings.

    Defaults are read from the YAML file named by ABI_TYPES_CONFIG, or
    `abi-types.yaml` in the working directory.
    """
    try:
        config = EnvConfig()
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    setup_logger(__name__, level="DEBUG" if verbose else config.LOG_LEVEL)
    ctx.obj = config


@abi_types.command(short_help="Encode an integer as a fixed-size hex string.")
@click.argument("value")
@click.option(
    "-b",
    "--bits",
    type=click.IntRange(8, 256),
    default=256,
    show_default=True,
    help="Width of the integer type, a multiple of 8.",
)
@click.option("-s", "--signed", is_flag=True, default=False, help="Use the signed type.")
def encode_int(value: str, bits: int, signed: bool):
    """
    Encode VALUE as the canonical hex string of an integer type.

    VALUE is a Python integer literal, e.g. `-1`, `255` or `0xff`.

    Example: encode -1 as an int16

        abi-types encode-int --bits 16 --signed -- -1

    Output: 0xffff
    """
    if bits % 8 != 0:
        raise click.BadParameter(f"{bits} is not a multiple of 8", param_hint="--bits")
    try:
        number = int(value, 0)
    except ValueError as e:
        raise click.BadParameter(f"{value!r} is not an integer", param_hint="VALUE") from e
    integer_type = get_integer_type(Kind.INT if signed else Kind.UINT, bits)
    try:
        click.echo(integer_type(number).hex())
    except OutOfRangeError as e:
        raise click.ClickException(str(e)) from e


@abi_types.command(name="decode", short_help="Decode a hex string.")
@click.argument("text")
@click.option("--exact", type=click.IntRange(min=0), help="Require exactly this many bytes.")
@click.option(
    "--expanded",
    type=click.IntRange(min=0),
    help="Left-pad the result with zeros to this many bytes.",
)
@click.pass_obj
def decode_text(config: EnvConfig, text: str, exact: int | None, expanded: int | None):
    """
    Decode TEXT and print it in its canonical form.

    Without options TEXT must have an even number of digits; `--exact` and
    `--expanded` decode into a buffer of fixed length.
    """
    if exact is not None and expanded is not None:
        raise click.UsageError("--exact and --expanded are mutually exclusive")
    if exact is not None:
        mode: Exact | Expanded | Unbounded = Exact(bytearray(exact))
    elif expanded is not None:
        mode = Expanded(bytearray(expanded))
    else:
        mode = Unbounded()
    try:
        click.echo(encode(decode(mode, text, config.PREFIX_POLICY)))
    except HexError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}") from e


@abi_types.command(short_help="Decode a hex string as an integer.")
@click.argument("text")
@click.option(
    "-b",
    "--bits",
    type=click.IntRange(8, 256),
    default=256,
    show_default=True,
    help="Width of the integer type, a multiple of 8.",
)
@click.option("-s", "--signed", is_flag=True, default=False, help="Use the signed type.")
@click.pass_obj
def decode_int(config: EnvConfig, text: str, bits: int, signed: bool):
    """Decode TEXT, left-padded to the width of the type, and print its value."""
    if bits % 8 != 0:
        raise click.BadParameter(f"{bits} is not a multiple of 8", param_hint="--bits")
    integer_type = get_integer_type(Kind.INT if signed else Kind.UINT, bits)
    try:
        data = decode_expanded(text, integer_type.byte_length, config.PREFIX_POLICY)
    except HexError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}") from e
    click.echo(int(integer_type.from_bytes(data)))


@abi_types.command(short_help="Print the conversion table of the integer types.")
@click.option(
    "--include-128/--no-128",
    "include_128",
    default=None,
    help="Include the 128-bit native primitives (default from the configuration).",
)
@click.pass_obj
def table(config: EnvConfig, include_128: bool | None):
    """
    Print, for every integer type, the native primitives it compares greater
    than (@gt), equal to (@eq) and less than (@lt).
    """
    if include_128 is None:
        include_128 = config.INCLUDE_128
    logger.debug("Formatting conversion table, include_128=%s", include_128)
    click.echo(format_table(conversion_table(include_128=include_128)))
