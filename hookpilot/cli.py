"""
HOOKPILOT - Command Line Interface
Entry point principal para todos os comandos do HOOKPILOT.
"""

import sys
from pathlib import Path

# ============================================================================
# CRITICAL: Add parent directory to Python path
# ============================================================================
# This allows 'import hookpilot' to work when running cli.py directly
_CLI_DIR = Path(__file__).parent
_PROJECT_ROOT = _CLI_DIR.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))
# ============================================================================

from typing import Optional

import typer

from hookpilot.__version__ import __version__
from hookpilot.core.catalog import load_template_catalog, CatalogLoadError
from hookpilot.core.config_store import ConfigStore
from hookpilot.core.output import console, print_error, print_info, print_warning
from hookpilot.core.prompts import Prompter
from hookpilot.hooks.install import HookInstaller
from hookpilot.hooks.remove import HookRemover, list_hooks
from hookpilot.tools.commands import CommandRunner
from hookpilot.tools.setup import ToolManager


# =============================================================================
# Typer App Setup
# =============================================================================

app = typer.Typer(
    name="hookpilot",
    help="🪝 HOOKPILOT - Git hooks com Git, Husky ou Lefthook",
    add_completion=True,
    rich_markup_mode="rich",
)


def _store() -> ConfigStore:
    return ConfigStore(Path.cwd())


def _tool_manager(store: ConfigStore, prompter: Prompter) -> ToolManager:
    return ToolManager(store, prompter, CommandRunner(store.project_root))


def _installer(store: ConfigStore, prompter: Prompter) -> HookInstaller:
    try:
        catalog = load_template_catalog()
    except CatalogLoadError as e:
        print_error(f"Erro ao carregar catálogo de templates: {e}")
        raise typer.Exit(1)
    return HookInstaller(store, catalog, prompter)


def _finish(ok: bool):
    raise typer.Exit(0 if ok else 1)


def _abort_cancelled():
    console.print()
    print_warning("Operação cancelada.")
    raise typer.Exit(1)


def _abort_internal(e: Exception):
    print_error(f"Erro interno: {e}")
    raise typer.Exit(1)


# =============================================================================
# Global Options
# =============================================================================

def version_callback(value: bool):
    """Callback para --version."""
    if value:
        console.print(f"🪝 HOOKPILOT version {__version__}", style="bold cyan")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Mostra versão do HOOKPILOT"
    )
):
    """
    🪝 HOOKPILOT - Git hooks com Git, Husky ou Lefthook

    Escolha a estratégia de hooks uma vez e gerencie os scripts a partir de templates.
    """
    pass


# =============================================================================
# Command: init
# =============================================================================

@app.command()
def init():
    """
    🔧 Inicializa o projeto com a ferramenta de hooks escolhida

    Exemplo:

    \b
    hookpilot init
    """

    store = _store()
    prompter = Prompter()

    try:
        ok = _tool_manager(store, prompter).initialize()

        if ok and prompter.confirm("Deseja adicionar hooks agora?", default=True):
            print_info("Adicionando hooks...", icon="🔧")
            ok = _installer(store, prompter).install()
        elif ok:
            print_info("Você pode adicionar hooks depois com: hookpilot add", icon="⚡")

    except (KeyboardInterrupt, EOFError):
        _abort_cancelled()

    except typer.Exit:
        raise

    except Exception as e:
        _abort_internal(e)

    if ok:
        print_info("Inicialização do hookpilot concluída!", icon="🎉")
    _finish(ok)


# =============================================================================
# Command: add
# =============================================================================

@app.command()
def add(
    hook_type: Optional[str] = typer.Argument(
        None,
        help="Hook a configurar (ex: pre-commit). Sem argumento, pergunta."
    ),
):
    """
    🪝 Adiciona um git hook a partir de um template

    Exemplos:

    \b
    # Escolher hook e template interativamente
    hookpilot add

    \b
    # Configurar o commit-msg
    hookpilot add commit-msg
    """

    store = _store()
    prompter = Prompter()

    try:
        ok = _installer(store, prompter).install(hook_type)

    except (KeyboardInterrupt, EOFError):
        _abort_cancelled()

    except typer.Exit:
        raise

    except Exception as e:
        _abort_internal(e)

    _finish(ok)


# =============================================================================
# Command: remove
# =============================================================================

@app.command()
def remove():
    """
    🗑️ Seleciona e remove hooks configurados

    Exemplo:

    \b
    hookpilot remove
    """

    try:
        ok = HookRemover(_store(), Prompter()).remove()

    except (KeyboardInterrupt, EOFError):
        _abort_cancelled()

    except Exception as e:
        _abort_internal(e)

    _finish(ok)


# =============================================================================
# Command: list
# =============================================================================

@app.command("list")
def list_command():
    """
    📃 Lista os hooks configurados

    Exemplo:

    \b
    hookpilot list
    """

    store = _store()
    list_hooks(store)
    _finish(store.exists())


# =============================================================================
# Command: restore
# =============================================================================

@app.command()
def restore():
    """
    🔄 Apaga os hooks gerenciados e volta à configuração inicial

    Exemplo:

    \b
    hookpilot restore
    """

    try:
        ok = _tool_manager(_store(), Prompter()).restore()

    except (KeyboardInterrupt, EOFError):
        _abort_cancelled()

    except Exception as e:
        _abort_internal(e)

    _finish(ok)


# =============================================================================
# Command: uninstall
# =============================================================================

@app.command()
def uninstall():
    """
    🧹 Remove a ferramenta de hooks e todos os arquivos gerados

    Exemplo:

    \b
    hookpilot uninstall
    """

    store = _store()
    prompter = Prompter()

    try:
        if store.exists() and not prompter.confirm(
            "A ferramenta, os hooks e hooks-config.json serão removidos. Continuar?"
        ):
            print_warning("Desinstalação cancelada.")
            raise typer.Exit(0)

        ok = _tool_manager(store, prompter).uninstall()

    except (KeyboardInterrupt, EOFError):
        _abort_cancelled()

    except typer.Exit:
        raise

    except Exception as e:
        _abort_internal(e)

    _finish(ok)


# =============================================================================
# Main Entry Point
# =============================================================================

def main():
    """Entry point principal."""
    app()


if __name__ == "__main__":
    main()
