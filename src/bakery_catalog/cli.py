"""Command line interface for operating the catalog service."""

from decimal import Decimal

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError

from bakery_catalog.core.services import (
    DbManageService,
    DbSessionService,
    ProductCatalogService,
)
from bakery_catalog.entities.service.product import Product, SqlProductRepository
from bakery_catalog.runtime.context import get_config
from bakery_catalog.runtime.init_db import init_db as create_tables

console = Console()

app = typer.Typer(
    name="bakery-catalog",
    help="Bakery catalog service - database setup, seeding and serving",
    rich_markup_mode="rich",
)


SAMPLE_PRODUCTS: list[Product] = [
    Product(
        name="Kremšnita",
        slug="kremsnita",
        description="Vanilla custard slice between layers of puff pastry.",
        price=Decimal("3.50"),
        ingredients="Puff pastry, milk, eggs, sugar, vanilla, cream",
        story="The classic cream slice from Samobor, baked every morning.",
        emoji="🍰",
    ),
    Product(
        name="Salted Caramel",
        slug="salted-caramel",
        description="Chocolate tart with a salted caramel filling.",
        price=Decimal("4.20"),
        ingredients="Shortcrust, dark chocolate, caramel, sea salt",
        story="A seasonal favourite, currently resting.",
        emoji="🍮",
        is_active=False,
    ),
    Product(
        name="Rozata",
        slug="rozata",
        description="Dubrovnik custard pudding flavoured with rose liqueur.",
        price=Decimal("2.75"),
        ingredients="Milk, eggs, sugar, rose liqueur, lemon zest",
        emoji="🍮",
    ),
]


@app.command("init-db")
def init_db() -> None:
    """Create the catalog tables."""
    try:
        create_tables()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to create tables: {e}[/red]")
        raise typer.Exit(code=1) from e
    console.print("[green]✅ Database tables created[/green]")


@app.command("seed")
def seed() -> None:
    """Insert the sample bakery products that are not present yet."""
    database_service = DbSessionService()
    DbManageService(database_service.engine).create_all()

    added = 0
    try:
        with database_service.session_scope() as session:
            repository = SqlProductRepository(session)
            for sample in SAMPLE_PRODUCTS:
                if repository.find_by_slug(sample.slug) is not None:
                    continue
                repository.save(sample.model_copy())
                added += 1
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to seed products: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(f"[green]✅ Added {added} products[/green]")


@app.command("products")
def list_products(
    active_only: bool = typer.Option(
        False, "--active-only", "-a", help="Only show active products"
    ),
) -> None:
    """Show the products in the catalog."""
    database_service = DbSessionService()
    try:
        with database_service.session_scope() as session:
            service = ProductCatalogService(SqlProductRepository(session))
            products = service.get_all_active() if active_only else service.get_all()
    except SQLAlchemyError as e:
        console.print(f"[red]❌ Failed to load products: {e}[/red]")
        raise typer.Exit(code=1) from e

    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(title="Products")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Price", style="magenta", justify="right")
    table.add_column("Slug", style="blue")
    table.add_column("Active", style="yellow")

    for item in products:
        table.add_row(
            str(item.id),
            f"{item.emoji or ''} {item.name}".strip(),
            "-" if item.price is None else f"{item.price:.2f}",
            item.slug or "",
            "✅" if item.is_active else "❌",
        )

    console.print(table)
    console.print(f"\n[green]Found {len(products)} products[/green]")


@app.command("serve")
def serve(
    host: str = typer.Option(None, "--host", help="Bind address (defaults to config)"),
    port: int = typer.Option(None, "--port", help="Port (defaults to config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "bakery_catalog.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,
    )


if __name__ == "__main__":
    app()
