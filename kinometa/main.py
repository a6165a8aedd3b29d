"""
Point d'entrée CLI de KinoMeta.

Initialise le container DI, configure le logging et fournit des commandes
d'interrogation directe de l'API Kinopoisk (utiles pour verifier un token
ou inspecter une fiche).
"""

import asyncio
from typing import Annotated, Any, Awaitable, Callable, Optional

import typer
from loguru import logger
from pydantic import BaseModel
from rich.console import Console

from . import __version__
from .adapters.api.gateway import KinopoiskGateway
from .config import Settings
from .container import Container
from .logging_config import configure_from_settings

app = typer.Typer(
    name="kinometa",
    help="Metadonnees de mediatheque depuis Kinopoisk",
)
container = Container()
console = Console()


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


def _to_jsonable(value: Any) -> Any:
    """Convertit un modele (ou un tuple de modeles) en structure JSON."""
    if isinstance(value, tuple):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return value


async def _query(call: Callable[[KinopoiskGateway], Awaitable[Optional[Any]]]) -> Optional[Any]:
    """Execute un appel de la passerelle puis libere ses ressources."""
    gateway = container.gateway()
    try:
        return await call(gateway)
    finally:
        await gateway.close()


def _run(call: Callable[[KinopoiskGateway], Awaitable[Optional[Any]]]) -> None:
    """Lance un appel de la passerelle et affiche le resultat en JSON."""
    result = asyncio.run(_query(call))
    if result is None:
        console.print("[red]Aucune donnee[/red] (introuvable, token absent ou API indisponible)")
        raise typer.Exit(code=1)
    console.print_json(data=_to_jsonable(result))


@app.command()
def film(film_id: Annotated[int, typer.Argument(help="ID Kinopoisk")]) -> None:
    """Affiche la fiche d'un film ou d'une serie."""
    _run(lambda gateway: gateway.fetch_film(film_id))


@app.command()
def search(keyword: Annotated[str, typer.Argument(help="Titre a rechercher")]) -> None:
    """Recherche des films et series par mot-cle."""
    _run(lambda gateway: gateway.search_films(keyword))


@app.command()
def staff(film_id: Annotated[int, typer.Argument(help="ID Kinopoisk du film")]) -> None:
    """Affiche l'equipe d'un film."""
    _run(lambda gateway: gateway.fetch_staff(film_id))


@app.command()
def person(person_id: Annotated[int, typer.Argument(help="ID de la personne")]) -> None:
    """Affiche la fiche d'une personne."""
    _run(lambda gateway: gateway.fetch_person(person_id))


@app.command()
def seasons(series_id: Annotated[int, typer.Argument(help="ID Kinopoisk de la serie")]) -> None:
    """Affiche les saisons et episodes d'une serie."""
    _run(lambda gateway: gateway.fetch_seasons(series_id))


@app.command()
def images(
    film_id: Annotated[int, typer.Argument(help="ID Kinopoisk du film")],
    image_type: Annotated[
        str, typer.Option("--type", "-t", help="STILL, POSTER, FAN_ART, COVER...")
    ] = "STILL",
) -> None:
    """Liste les images d'un film."""
    _run(lambda gateway: gateway.fetch_images(film_id, image_type.upper()))


@app.command()
def videos(film_id: Annotated[int, typer.Argument(help="ID Kinopoisk du film")]) -> None:
    """Liste les bandes-annonces d'un film."""
    _run(lambda gateway: gateway.fetch_videos(film_id))


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"API Kinopoisk : {'activée' if config.api_enabled else 'désactivée (token absent)'}")
    typer.echo(f"Cache : {config.cache_backend}, {config.cache_duration_minutes} min")
    rate = f"{config.max_requests_per_second:g} req/s" if config.enable_rate_limiting else "désactivé"
    typer.echo(f"Rate limiting : {rate}")
    typer.echo(f"Métadonnées en russe : {'oui' if config.prefer_russian_metadata else 'non'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"KinoMeta v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_from_settings(settings)

    logger.debug(f"Démarrage de KinoMeta v{__version__}")

    app()


if __name__ == "__main__":
    main()
