"""CLI (Typer + Rich): comandos y componentes de presentación."""
