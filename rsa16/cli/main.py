"""RSA16 CLI - Key generation, encryption and signing commands."""
import logging
import random
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from rsa16 import RSA16, setup_logging
from rsa16.core.crypto import KeyGenerator, SystemRandomSource
from rsa16.core.crypto.utils.encoding import hex_dump
from rsa16.core.exceptions import RSA16Exception
from rsa16.core.logging import get_logger

logger = get_logger(__name__)

app = typer.Typer(
    name="rsa16",
    help="Educational 16-bit RSA: keys, chained encryption and signatures",
    add_completion=False
)
console = Console()

SAMPLE = (
    "The quick, brown fox jumps over a lazy dog. DJs flock by when MTV ax quiz prog. "
    "Junk MTV quiz graced by fox whelps. Bawds jog, flick quartz, vex nymphs. "
    "Waltz, bad nymph, for quick jigs vex! Fox nymphs grab quick-jived waltz. "
    "Brick quiz whangs jumpy veldt."
)


def random_source(seed: Optional[int]):
    """Seeded source for reproducible runs, system RNG otherwise."""
    if seed is None:
        return SystemRandomSource()
    return random.Random(seed)


def fail(message: str) -> None:
    console.print(f"[red]{message}[/red]")
    raise typer.Exit(1)


def read_input(message: str, hex_input: bool) -> bytes:
    """Decode a command argument as hex or as UTF-8 text."""
    if not hex_input:
        return message.encode()
    try:
        return bytes.fromhex(message)
    except ValueError:
        fail(f"Invalid hex input: {message}")


def printable(data: bytes) -> str:
    return ''.join(chr(b) if 32 <= b <= 126 else '.' for b in data)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """RSA16 command line."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        setup_logging(logging.DEBUG)


@app.command()
def keygen(
    seed: int = typer.Option(None, "--seed", "-s", help="Seed for a reproducible key"),
):
    """Generate an RSA16 key."""
    material = KeyGenerator(random_source(seed)).generate_material()
    
    table = Table(title="RSA16 key")
    table.add_column("Name", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Modulus (n)", str(material.n))
    table.add_row("Public exponent (e)", str(material.e))
    table.add_row("Private exponent (d)", str(material.d))
    table.add_row("p", str(material.p), style="dim")
    table.add_row("q", str(material.q), style="dim")
    table.add_row("phi(n)", str(material.phi), style="dim")
    console.print(table)


@app.command()
def encrypt(
    message: str = typer.Argument(..., help="Plaintext (text, or hex with --hex)"),
    modulus: int = typer.Option(..., "--modulus", "-n", help="Modulus n"),
    public: int = typer.Option(..., "--public", "-e", help="Public exponent e"),
    iv: int = typer.Option(None, "--iv", help="Initial chaining byte (1-255)"),
    hex_input: bool = typer.Option(False, "--hex", "-x", help="Treat MESSAGE as hex"),
):
    """Encrypt a message in chained mode and print the ciphertext as hex."""
    data = read_input(message, hex_input)
    try:
        rsa = RSA16(modulus, public, 0, iv)
        cipher = rsa.encrypt_bytes(data)
    except RSA16Exception as e:
        fail(f"Encryption failed: {e}")
    typer.echo(cipher.hex())


@app.command()
def decrypt(
    cipher: str = typer.Argument(..., help="Ciphertext as hex"),
    modulus: int = typer.Option(..., "--modulus", "-n", help="Modulus n"),
    private: int = typer.Option(..., "--private", "-d", help="Private exponent d"),
    iv: int = typer.Option(None, "--iv", help="Initial chaining byte (1-255)"),
    as_hex: bool = typer.Option(False, "--hex", "-x", help="Print plaintext as hex"),
):
    """Decrypt a chained-mode ciphertext."""
    data = read_input(cipher, True)
    try:
        rsa = RSA16(modulus, 0, private, iv)
        plain = rsa.decrypt_bytes(data)
    except RSA16Exception as e:
        fail(f"Decryption failed: {e}")
    typer.echo(plain.hex() if as_hex else plain.decode(errors='replace'))


@app.command()
def sign(
    message: str = typer.Argument(..., help="Message (text, or hex with --hex)"),
    modulus: int = typer.Option(..., "--modulus", "-n", help="Modulus n"),
    private: int = typer.Option(..., "--private", "-d", help="Private exponent d"),
    hex_input: bool = typer.Option(False, "--hex", "-x", help="Treat MESSAGE as hex"),
):
    """Sign every byte of a message and print the signature as hex."""
    data = read_input(message, hex_input)
    try:
        signature = RSA16(modulus, 0, private).sign_bytes(data)
    except RSA16Exception as e:
        fail(f"Signing failed: {e}")
    typer.echo(signature.hex())


@app.command()
def verify(
    message: str = typer.Argument(..., help="Message (text, or hex with --hex)"),
    signature: str = typer.Argument(..., help="Signature as hex"),
    modulus: int = typer.Option(..., "--modulus", "-n", help="Modulus n"),
    public: int = typer.Option(..., "--public", "-e", help="Public exponent e"),
    hex_input: bool = typer.Option(False, "--hex", "-x", help="Treat MESSAGE as hex"),
):
    """Verify a per-byte signature. Exits with status 1 if it does not match."""
    data = read_input(message, hex_input)
    sig = read_input(signature, True)
    try:
        valid = RSA16(modulus, public, 0).validate_signature_bytes(data, sig)
    except RSA16Exception as e:
        fail(f"Verification failed: {e}")
    if not valid:
        fail("Signature invalid")
    console.print("[green]Signature valid[/green]")


@app.command("sign-crc")
def sign_crc(
    message: str = typer.Argument(..., help="Message (text, or hex with --hex)"),
    modulus: int = typer.Option(..., "--modulus", "-n", help="Modulus n"),
    private: int = typer.Option(..., "--private", "-d", help="Private exponent d"),
    hex_input: bool = typer.Option(False, "--hex", "-x", help="Treat MESSAGE as hex"),
):
    """Sign the CRC16 of a message and print the 32-bit signature as hex."""
    data = read_input(message, hex_input)
    try:
        signature = RSA16(modulus, 0, private).sign_crc(data)
    except RSA16Exception as e:
        fail(f"Signing failed: {e}")
    typer.echo(f"{signature:08x}")


@app.command("verify-crc")
def verify_crc(
    message: str = typer.Argument(..., help="Message (text, or hex with --hex)"),
    signature: str = typer.Argument(..., help="32-bit signature as hex"),
    modulus: int = typer.Option(..., "--modulus", "-n", help="Modulus n"),
    public: int = typer.Option(..., "--public", "-e", help="Public exponent e"),
    hex_input: bool = typer.Option(False, "--hex", "-x", help="Treat MESSAGE as hex"),
):
    """Verify a CRC16 signature. Exits with status 1 if it does not match."""
    data = read_input(message, hex_input)
    try:
        value = int(signature, 16)
    except ValueError:
        fail(f"Invalid hex signature: {signature}")
    try:
        valid = RSA16(modulus, public, 0).validate_signature_crc(data, value)
    except RSA16Exception as e:
        fail(f"Verification failed: {e}")
    if not valid:
        fail("Signature invalid")
    console.print("[green]Signature valid[/green]")


@app.command()
def demo(
    seed: int = typer.Option(None, "--seed", "-s", help="Seed for a reproducible key"),
    size: int = typer.Option(256, "--size", help="Message size in bytes"),
):
    """Generate a key, then encrypt, decrypt, sign and verify a sample message."""
    if size < 1:
        fail("Size must be positive")
    
    rsa = RSA16.generate(random_source(seed))
    n, e, d = rsa.key
    console.print("RSA16 keys generated:")
    console.print(f"Modulus (n) = {n}")
    console.print(f"Public exponent (e) = {e}")
    console.print(f"Private exponent (d) = {d}")
    
    message = (SAMPLE.encode() * (size // len(SAMPLE) + 1))[:size]
    cipher = rsa.encrypt_bytes(message)
    decrypted = rsa.decrypt_bytes(cipher)
    
    console.print(f"\nMessage: ({len(message)} bytes)")
    console.print(hex_dump(message), highlight=False)
    console.print(f"\nCipher: ({len(cipher)} bytes)")
    console.print(hex_dump(cipher), highlight=False)
    console.print(f"\nDecrypted message: ({len(decrypted)} bytes)")
    console.print(hex_dump(decrypted), highlight=False)
    console.print("\nDecrypted message (as string):")
    console.print(printable(decrypted), markup=False, highlight=False)
    
    if decrypted != message:
        fail("\nDecryption failed!")
    console.print("\n[green]Decryption successful![/green]")
    
    signature = rsa.sign_bytes(message)
    console.print(f"\nSignature: ({len(signature)} bytes)")
    console.print(hex_dump(signature), highlight=False)
    
    if not rsa.validate_signature_bytes(message, signature):
        fail("\nSignature verification failed!")
    console.print("\n[green]Signature verified![/green]")
    
    crc_signature = rsa.sign_crc(message)
    if not rsa.validate_signature_crc(message, crc_signature):
        fail("\nCRC signature verification failed!")
    console.print(f"[green]CRC signature {crc_signature:08x} verified![/green]")
    logger.debug(f"Demo finished for n={n}, message size {size}")


def run():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    run()
