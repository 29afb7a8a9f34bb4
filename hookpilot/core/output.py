"""
HOOKPILOT - Console Output
Mensagens para o usuário com três níveis visuais: erro, aviso e sucesso.
"""

from rich.console import Console


console = Console(soft_wrap=True, highlight=False, emoji=False)


def print_error(message: str):
    """❌ Falha: a operação foi abortada."""
    console.print(f"❌ {message}", style="red", markup=False)


def print_warning(message: str):
    """⚠️ Situação esperada que não aborta a operação."""
    console.print(f"⚠️  {message}", style="yellow", markup=False)


def print_success(message: str):
    console.print(f"✅ {message}", style="green", markup=False)


def print_info(message: str, icon: str = ""):
    text = f"{icon} {message}" if icon else message
    console.print(text, markup=False)


__all__ = [
    "console",
    "print_error",
    "print_warning",
    "print_success",
    "print_info",
]
