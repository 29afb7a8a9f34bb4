"""
HOOKPILOT - Hook Remover & Listing
Remove hooks configurados e lista o estado atual.
"""

from pathlib import Path
from typing import List, Optional, Sequence

from ..core.config_store import ConfigStore
from ..core.models import ConfigError, HookPilotError, Tool, hook_path
from ..core.output import print_error, print_info, print_success, print_warning
from ..core.prompts import Prompter
from .install import NOT_INITIALIZED_MESSAGE


class HookRemover:
    """Remove scripts de hook e suas entradas na configuração."""

    def __init__(self, store: ConfigStore, prompter: Prompter):
        self.store = store
        self.prompter = prompter

    def remove(self, hook_types: Optional[Sequence[str]] = None) -> bool:
        """
        Remove hooks.

        Arquivos já ausentes geram aviso, mas a configuração é limpa de
        qualquer forma e o lote continua.

        Args:
            hook_types: Hooks a remover (None = perguntar entre os configurados)

        Returns:
            True se a operação terminou sem erro
        """
        if not self.store.exists():
            print_error(NOT_INITIALIZED_MESSAGE)
            return False

        try:
            record = self.store.load()

            if not record.hooks:
                print_warning("Nenhum hook configurado para remover.")
                return True

            if hook_types is None:
                hook_types = self.prompter.multiselect(
                    "Selecione os hooks a remover:",
                    record.hooks,
                )

            if not hook_types:
                print_warning("Nenhum hook selecionado para remoção.")
                return True

            # Nome inválido aborta antes de qualquer arquivo ser apagado
            for hook_type in hook_types:
                hook_path(record.name, hook_type, self.store.project_root)

            for hook_type in hook_types:
                remove_hook_file(record.name, hook_type, self.store.project_root)

            self.store.remove_hooks(record, hook_types)
            self.store.save(record)

        except (HookPilotError, OSError) as e:
            print_error(f"Erro ao remover hooks: {e}")
            return False

        print_success(f"Hooks removidos de {self.store.path.name}: {', '.join(hook_types)}")
        return True


# =============================================================================
# Helper Functions
# =============================================================================

def remove_hook_file(tool: Tool, hook_type: str, project_root: Path) -> bool:
    """
    Apaga o script de um hook, se existir.

    Returns:
        True se um arquivo foi removido
    """
    target = hook_path(tool, hook_type, project_root)

    if target is None:
        print_info(f"{hook_type}: Lefthook não usa arquivos de hook, nada a apagar.", icon="ℹ️")
        return False

    if not target.exists():
        print_warning(
            f"Nenhum arquivo encontrado para '{hook_type}'. "
            "Pode ter sido apagado manualmente."
        )
        return False

    target.unlink()
    print_success(f"Hook '{hook_type}' removido.")
    return True


def list_hooks(store: ConfigStore) -> List[str]:
    """
    Lista os hooks configurados.

    Entrada malformada nunca gera exceção: degrada para a mensagem de lista vazia.

    Returns:
        Hooks listados
    """
    if not store.exists():
        print_error(NOT_INITIALIZED_MESSAGE)
        return []

    try:
        data = store.read_raw()
    except (ConfigError, OSError):
        data = None

    hooks = data.get("hooks") if isinstance(data, dict) else None
    if not isinstance(hooks, list) or not hooks:
        print_info("Nenhum hook encontrado.")
        return []

    config = data.get("config")
    if not isinstance(config, dict):
        config = {}

    try:
        tool: Optional[Tool] = Tool.parse(data.get("name"))
    except ConfigError:
        tool = None

    listed = []
    for hook in hooks:
        if not isinstance(hook, str) or hook in listed:
            continue
        listed.append(hook)

        params = config.get(hook)
        template = params.get("template") if isinstance(params, dict) else None
        line = f"{hook} ({template})" if template else hook
        print_info(line, icon="📃")

        try:
            target = hook_path(tool, hook, store.project_root) if tool else None
        except ConfigError:
            target = None
        if target is not None and not target.exists():
            print_warning(f"Script de {hook} ausente em {target}")

    return listed


__all__ = [
    "HookRemover",
    "remove_hook_file",
    "list_hooks",
]
