"""
HOOKPILOT - Hook Installer
Grava scripts de hook no diretório da ferramenta ativa e mantém a configuração em dia.
"""

from pathlib import Path
from typing import Optional, Union

import yaml

from ..config import CONFIG_FILE_NAME, LEFTHOOK_CONFIG_NAME
from ..core.config_store import ConfigStore
from ..core.models import GeneratedTemplate, HookPilotError, TemplateCatalog, hook_path
from ..core.output import print_error, print_info, print_success, print_warning
from ..core.prompts import Prompter
from .selector import TemplateSelector


NOT_INITIALIZED_MESSAGE = (
    f"Configuração não inicializada ({CONFIG_FILE_NAME} ausente). "
    "Execute 'hookpilot init' primeiro."
)

HOOK_FILE_MODE = 0o755


class HookInstaller:
    """Instala um hook a partir de um template do catálogo."""

    def __init__(
        self,
        store: ConfigStore,
        catalog: TemplateCatalog,
        prompter: Prompter,
        selector: Optional[TemplateSelector] = None,
    ):
        """
        Inicializa o instalador.

        Args:
            store: Configuration store do projeto
            catalog: Catálogo de templates carregado na inicialização
            prompter: Interface de perguntas
            selector: Seletor de templates (default: um novo sobre o mesmo catálogo)
        """
        self.store = store
        self.catalog = catalog
        self.prompter = prompter
        self.selector = selector or TemplateSelector(catalog, prompter)

    @property
    def project_root(self) -> Path:
        return self.store.project_root

    def choose_hook_type(self) -> str:
        """Pergunta qual hook configurar entre os do catálogo."""
        return self.prompter.select(
            "Qual git hook você quer configurar?",
            self.catalog.hook_types,
        )

    def install(self, hook_type: Optional[str] = None) -> bool:
        """
        Instala (ou regrava) um hook.

        O script é gravado antes da configuração; se a escrita falhar a
        configuração não é tocada.

        Args:
            hook_type: Nome do hook (None = perguntar)

        Returns:
            True se o hook foi configurado (ou orientado, no caso do Lefthook)
        """
        if not self.store.exists():
            print_error(NOT_INITIALIZED_MESSAGE)
            return False

        try:
            record = self.store.load()

            if hook_type is None:
                hook_type = self.choose_hook_type()

            if hook_type not in self.catalog:
                print_error(f"Hook desconhecido: {hook_type}")
                return False

            template_id = self.selector.select_template(hook_type)
            generated = self.selector.generate_content(template_id, hook_type)

            target = hook_path(record.name, hook_type, self.project_root)
            if target is None:
                print_lefthook_notice(hook_type, generated)
                return True

            write_hook_file(target, generated.content)

            self.store.add_hook(record, hook_type, generated.params)
            self.store.save(record)

        except (HookPilotError, OSError) as e:
            print_error(f"Erro ao configurar hook: {e}")
            return False

        print_info(
            f"Configuração atualizada: {hook_type} usa o template {template_id}",
            icon="📄",
        )
        print_success(
            f"Hook {hook_type} configurado com {record.name.value} em {target}"
        )
        return True


# =============================================================================
# Helper Functions
# =============================================================================

def write_hook_file(target: Path, content: Union[str, bytes]):
    """
    Grava o script e força permissão 0755 mesmo se o arquivo já existia.

    Bytes (templates customizados) são gravados sem nenhuma conversão.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")

    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(content)
    target.chmod(HOOK_FILE_MODE)


def print_lefthook_notice(hook_type: str, generated: GeneratedTemplate):
    """Lefthook é configurado via YAML: só orienta o usuário."""
    print_warning(
        f"Lefthook requer configuração manual em {LEFTHOOK_CONFIG_NAME}. "
        f"Template escolhido para {hook_type}: {generated.template_id}"
    )

    command = generated.params.get("command")
    if command:
        snippet = {hook_type: {"commands": {generated.template_id: {"run": command}}}}
        print_info("Sugestão de trecho:", icon="💡")
        print_info(yaml.safe_dump(snippet, sort_keys=False).rstrip())


__all__ = [
    "HookInstaller",
    "write_hook_file",
    "print_lefthook_notice",
    "NOT_INITIALIZED_MESSAGE",
    "HOOK_FILE_MODE",
]
