"""CLI entry point for the script generator."""

import logging
import typer
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import requests

from . import __version__
from .config import config
from .credentials import CredentialStore
from .errors import (
    MissingCredentialError,
    ProviderHTTPError,
    ScriptGenError,
    UnsupportedProviderError,
)
from .models import AIProvider, DurationBucket, ImageSet, ProviderKind, ScriptData, TopicItem, TopicState, VideoStyle
from .providers import PROVIDERS, get_provider, provider_ids

app = typer.Typer(
    name="script-gen",
    help="AI-powered YouTube script generator",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"script-gen version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """YouTube Script Generator - Write scripts and topic images using AI."""
    try:
        config.validate_timeouts()
    except ValueError as e:
        typer.echo(f"❌ Configuration error: {e}")
        raise typer.Exit(1)


def _lookup_provider(provider_id: str, kind: Optional[ProviderKind] = None) -> AIProvider:
    try:
        return get_provider(provider_id, kind)
    except UnsupportedProviderError as e:
        typer.echo(f"❌ {e}")
        typer.echo(f"   Known providers: {', '.join(provider_ids(kind))}")
        raise typer.Exit(1)


def _ensure_key(provider: AIProvider, store: CredentialStore) -> None:
    """Ask for and save an API key when none is stored for `provider`."""
    if store.has(provider.key_name):
        return
    typer.echo(f"🔑 {provider.name} API key required")
    typer.echo(f"   Get one at: {provider.api_key_url}")
    key = typer.prompt("   API key", hide_input=True)
    try:
        store.set(provider.key_name, key)
    except ValueError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)
    typer.echo(f"   Saved to {store.path}")


@app.command()
def providers() -> None:
    """List available providers and whether an API key is configured."""
    store = CredentialStore()

    for kind in ("text", "image"):
        typer.echo(f"\n{'📝' if kind == 'text' else '🖼️ '} {kind.capitalize()} providers:")
        for provider in PROVIDERS:
            if provider.kind.value != kind:
                continue
            status_icon = "✅" if store.has(provider.key_name) else "⏳"
            typer.echo(f"   {status_icon} {provider.icon} {provider.id}: {provider.name}")
            typer.echo(f"      → {provider.api_key_url}")


@app.command("set-key")
def set_key(
    provider_id: str = typer.Argument(
        ...,
        help="Provider id (see 'script-gen providers')"
    ),
    key: Optional[str] = typer.Argument(
        None,
        help="API key (prompted for if omitted)"
    ),
    remove: bool = typer.Option(
        False,
        "--remove",
        help="Remove the stored key instead"
    ),
) -> None:
    """Store an API key for a provider."""
    provider = _lookup_provider(provider_id)
    store = CredentialStore()

    if remove:
        if store.delete(provider.key_name):
            typer.echo(f"🗑️  Removed {provider.name} API key")
        else:
            typer.echo(f"⚠️  No stored key for {provider.name}")
        return

    if key is None:
        typer.echo(f"   Get your key at: {provider.api_key_url}")
        key = typer.prompt(f"{provider.name} API key", hide_input=True)

    try:
        store.set(provider.key_name, key)
    except ValueError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)

    typer.echo(f"✅ Saved {provider.name} API key to {store.path}")


def _image_suffix(url: str) -> str:
    suffix = Path(urlparse(url).path).suffix
    return suffix if suffix else ".png"


def _run_images(
    script_text: str,
    script_path: Optional[Path],
    provider_id: str,
    image_set_path: Path,
    download_dir: Optional[Path],
) -> int:
    """Generate one image per topic. Returns the number of failed topics."""
    from .orchestrator import TopicImageOrchestrator
    from .services import ImageDispatcher

    store = CredentialStore()
    provider = _lookup_provider(provider_id, ProviderKind.IMAGE)

    def report(item: TopicItem) -> None:
        if item.state == TopicState.LOADING:
            typer.echo(f"   ⏳ {item.id}: {item.title}")
        elif item.state == TopicState.HAS_IMAGE:
            typer.echo(f"   ✅ {item.id}: {item.image_url}")
        elif item.state == TopicState.HAS_ERROR:
            typer.echo(f"   ❌ {item.id}: {item.error}")

    dispatcher = ImageDispatcher(credentials=store)
    try:
        adapter = dispatcher.adapter_for(provider.id)
    except UnsupportedProviderError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)
    orchestrator = TopicImageOrchestrator(provider.id, dispatcher=dispatcher, listener=report)

    # Resume a previous run for the same script and provider
    if image_set_path.exists():
        try:
            previous = ImageSet.from_yaml(image_set_path)
        except Exception as e:
            typer.echo(f"❌ Error loading image set: {e}")
            raise typer.Exit(1)
        if previous.matches(script_text, provider.id):
            orchestrator.load_items(previous.items)
            typer.echo(f"   Resuming {image_set_path}")
        else:
            typer.echo("   Script or provider changed, starting a new image set")

    if not orchestrator.items:
        orchestrator.load_script(script_text)

    if not orchestrator.items:
        typer.echo("⚠️  No topics found in the script")
        return 0

    pending = [item for item in orchestrator.items if not item.image_url]
    typer.echo(f"\n🎨 Generating images with {provider.name}")
    typer.echo(f"   Topics: {len(orchestrator.items)}")
    typer.echo(f"   To generate: {len(pending)}\n")

    if pending and adapter.requires_credential:
        _ensure_key(provider, store)

    try:
        orchestrator.generate_all()
    except MissingCredentialError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)
    finally:
        image_set = ImageSet(
            script_file=str(script_path) if script_path else None,
            script_hash=ImageSet.fingerprint(script_text),
            provider=provider.id,
            items=orchestrator.items,
        )
        image_set_path.parent.mkdir(parents=True, exist_ok=True)
        image_set.to_yaml(image_set_path)
        typer.echo(f"\n📄 Image set saved: {image_set_path}")

    if download_dir:
        from .export import download_image

        for item in orchestrator.items:
            if not item.image_url:
                continue
            target = download_dir / f"{item.id}{_image_suffix(item.image_url)}"
            try:
                download_image(item.image_url, target)
                typer.echo(f"   ⬇️  {target}")
            except requests.RequestException as e:
                typer.echo(f"   ⚠️  Could not download {item.id}: {e}")

    return sum(1 for item in orchestrator.items if item.error)


@app.command()
def generate(
    topic: str = typer.Option(
        ...,
        "--topic",
        "-t",
        help="Video topic"
    ),
    duration: DurationBucket = typer.Option(
        ...,
        "--duration",
        "-d",
        help="Video duration in minutes"
    ),
    style: VideoStyle = typer.Option(
        ...,
        "--style",
        "-s",
        help="Video style"
    ),
    keywords: str = typer.Option(
        "",
        "--keywords",
        "-k",
        help="Style keywords (e.g., 'fast-paced, humorous')"
    ),
    language: str = typer.Option(
        config.default_language,
        "--language",
        "-l",
        help="Script language code"
    ),
    audience: str = typer.Option(
        "",
        "--audience",
        "-a",
        help="Target audience"
    ),
    info: str = typer.Option(
        "",
        "--info",
        "-i",
        help="Additional information for the script"
    ),
    provider_id: str = typer.Option(
        config.default_provider,
        "--provider",
        "-p",
        help="Text provider id"
    ),
    output: Path = typer.Option(
        Path("./scripts"),
        "--output",
        "-o",
        help="Output directory for the script file"
    ),
    images: bool = typer.Option(
        False,
        "--images/--no-images",
        help="Also generate one image per topic"
    ),
    image_provider: str = typer.Option(
        config.default_image_provider,
        "--image-provider",
        help="Image provider id"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Generate a YouTube script with the selected AI provider."""
    from .export import save_script
    from .services import ScriptDispatcher

    setup_logging(verbose)

    try:
        script_data = ScriptData(
            topic=topic,
            duration=duration,
            style=style,
            style_keywords=keywords,
            language=language,
            audience=audience,
            additional_info=info,
        )
    except ValueError as e:
        typer.echo(f"❌ Invalid input: {e}")
        raise typer.Exit(1)

    provider = _lookup_provider(provider_id, ProviderKind.TEXT)
    store = CredentialStore()
    _ensure_key(provider, store)

    typer.echo(f"🎬 Writing script: {script_data.topic}")
    typer.echo(f"   Provider: {provider.name}")
    typer.echo(f"   Duration: {script_data.duration.value} min, style: {script_data.style.value}")

    try:
        dispatcher = ScriptDispatcher(credentials=store)
        script = dispatcher.generate(provider.id, script_data)
    except ProviderHTTPError as e:
        typer.echo(f"❌ {e}")
        typer.echo("   Check your API key and try again.")
        raise typer.Exit(1)
    except (ScriptGenError, requests.RequestException) as e:
        typer.echo(f"❌ Error generating script: {e}")
        raise typer.Exit(1)

    try:
        path = save_script(script, script_data.topic, provider.id, output)
    except OSError as e:
        typer.echo(f"❌ Error saving script: {e}")
        raise typer.Exit(1)

    typer.echo(f"\n{script}\n")
    typer.echo(f"✅ Script saved: {path}")

    if images:
        failed = _run_images(
            script,
            path,
            image_provider,
            path.with_suffix(".images.yaml"),
            None,
        )
        if failed:
            typer.echo(f"\n⚠️  {failed} topic(s) failed to generate")
            raise typer.Exit(1)


@app.command()
def topics(
    script: Path = typer.Argument(
        ...,
        help="Path to a script text file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
) -> None:
    """Show the topics extracted from a script."""
    from .topics import extract_topics

    found = extract_topics(script.read_text(encoding="utf-8"))
    if not found:
        typer.echo("⚠️  No topics found")
        return

    typer.echo(f"📋 Topics ({len(found)}):")
    for i, title in enumerate(found, start=1):
        typer.echo(f"   {i}. {title}")


@app.command()
def images(
    script: Path = typer.Argument(
        ...,
        help="Path to a script text file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    provider_id: str = typer.Option(
        config.default_image_provider,
        "--provider",
        "-p",
        help="Image provider id"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Image set YAML path (defaults to <script>.images.yaml)"
    ),
    download: Optional[Path] = typer.Option(
        None,
        "--download",
        "-D",
        help="Directory to download generated images into"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Generate one image per topic of a script.

    Topics that already have an image in the image set are skipped, so the
    command can be re-run to retry failures.
    """
    setup_logging(verbose)

    image_set_path = output or script.with_suffix(".images.yaml")
    failed = _run_images(
        script.read_text(encoding="utf-8"),
        script,
        provider_id,
        image_set_path,
        download,
    )

    if failed:
        typer.echo(f"\n⚠️  {failed} topic(s) failed to generate")
        raise typer.Exit(1)
    typer.echo("\n✅ All topic images generated!")


if __name__ == "__main__":
    app()
