"""
HOOKPILOT - Tool Setup / Restore / Uninstall
Instala e remove a ferramenta de hooks escolhida e reseta o core.hooksPath.
"""

import shutil
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..config import LEFTHOOK_CONFIG_NAME, PACKAGE_MANIFEST_NAME
from ..core.config_store import ConfigStore
from ..core.models import HookPilotError, HooksConfig, Tool
from ..core.output import print_error, print_info, print_success, print_warning
from ..core.prompts import Prompter
from ..hooks.install import NOT_INITIALIZED_MESSAGE
from .commands import CommandError, CommandRunner
from .manifest import (
    inject_setup_scripts,
    read_manifest,
    strip_setup_scripts,
    write_manifest,
)


DEFAULT_LEFTHOOK_CONFIG: Dict[str, Any] = {
    "pre-commit": {
        "parallel": True,
        "commands": {},
    },
    "commit-msg": {
        "commands": {},
    },
}


class ToolManager:
    """
    Gerencia o ciclo de vida da ferramenta de hooks no projeto.

    Responsabilidades:
    - init: instalar ferramenta, configurar core.hooksPath e criar configuração
    - restore: apagar hooks gerenciados e zerar a configuração
    - uninstall: remover ferramenta, diretórios, scripts injetados e configuração
    """

    def __init__(
        self,
        store: ConfigStore,
        prompter: Prompter,
        runner: Optional[CommandRunner] = None,
    ):
        """
        Args:
            store: Configuration store do projeto
            prompter: Interface de perguntas
            runner: Executor de comandos externos (default: na raiz do projeto)
        """
        self.store = store
        self.prompter = prompter
        self.runner = runner or CommandRunner(store.project_root)

    @property
    def project_root(self) -> Path:
        return self.store.project_root

    @property
    def manifest_path(self) -> Path:
        return self.project_root / PACKAGE_MANIFEST_NAME

    @property
    def lefthook_config_path(self) -> Path:
        return self.project_root / LEFTHOOK_CONFIG_NAME

    # -------------------------------------------------------------------------
    # init
    # -------------------------------------------------------------------------

    def choose_tool(self) -> Tool:
        tools = list(Tool)
        choice = self.prompter.select(
            "Qual ferramenta deve gerenciar os hooks?",
            [t.value for t in tools],
            labels=[t.label for t in tools],
        )
        return Tool.parse(choice)

    def initialize(self, tool: Optional[Tool] = None) -> bool:
        """
        Configura o projeto para a ferramenta escolhida.

        A configuração é gravada por último: se algum passo falhar o projeto
        não parece inicializado.

        Returns:
            True se o projeto está inicializado ao final
        """
        if self.store.exists():
            print_warning(f"Configuração já existe em {self.store.path.name}.")
            return True

        try:
            tool = tool or self.choose_tool()
            print_info(f"Configurando hooks com {tool.label}...", icon="🔧")

            self.install_package(tool)
            hooks_dir = self.project_root / tool.directory
            hooks_dir.mkdir(parents=True, exist_ok=True)

            if tool.manages_hooks_path:
                self.set_hooks_path(tool)

            if tool is Tool.LEFTHOOK:
                self.write_lefthook_config()
                self.runner.run(["npx", "lefthook", "install"])

            if tool.manages_hooks_path:
                self.inject_manifest_scripts(tool)

            self.store.save(HooksConfig.for_tool(tool))

        except (HookPilotError, OSError, yaml.YAMLError) as e:
            print_error(f"Erro ao inicializar: {e}")
            return False

        print_success(f"Arquivo de configuração gerado: {self.store.path}")
        return True

    def install_package(self, tool: Tool):
        if not tool.package:
            return

        if not self.manifest_path.exists():
            print_warning(
                f"{PACKAGE_MANIFEST_NAME} não encontrado: instale '{tool.package}' manualmente."
            )
            return

        print_info(f"Instalando {tool.package}...", icon="📦")
        self.runner.run(["npm", "install", "--save-dev", tool.package])
        print_success(f"{tool.package} instalado.")

    def set_hooks_path(self, tool: Tool):
        print_info(f"Definindo core.hooksPath: {tool.directory}", icon="🔧")
        self.runner.run(["git", "config", "core.hooksPath", tool.directory])
        print_success("core.hooksPath configurado.")

    def write_lefthook_config(self):
        with open(self.lefthook_config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(DEFAULT_LEFTHOOK_CONFIG, f, sort_keys=False)
        print_success(f"{LEFTHOOK_CONFIG_NAME} padrão gravado.")

    def inject_manifest_scripts(self, tool: Tool):
        if not self.manifest_path.exists():
            print_warning(
                f"{PACKAGE_MANIFEST_NAME} não encontrado: script 'postinstall' não adicionado."
            )
            return

        manifest = read_manifest(self.manifest_path)
        write_manifest(self.manifest_path, inject_setup_scripts(manifest, tool))
        print_success(f"Script 'postinstall' adicionado ao {PACKAGE_MANIFEST_NAME}.")

    # -------------------------------------------------------------------------
    # restore
    # -------------------------------------------------------------------------

    def restore(self) -> bool:
        """
        Apaga os hooks gerenciados e zera `hooks`/`config`.

        Exige um "sim" explícito; recusar não altera nada.
        """
        if not self.store.exists():
            print_error(NOT_INITIALIZED_MESSAGE)
            return False

        try:
            record = self.store.load()
            print_info(f"Ferramenta detectada: {record.name.label}", icon="🔎")

            if not self.prompter.confirm(
                "A configuração atual de hooks será removida. Deseja continuar?"
            ):
                print_warning("Restauração cancelada.")
                return True

            self.clean_hooks_dir(record.name)
            (self.project_root / record.name.directory).mkdir(parents=True, exist_ok=True)

            if record.name is Tool.LEFTHOOK:
                self.write_lefthook_config()

            record.hooks = []
            record.config = {}
            self.store.save(record)

        except (HookPilotError, OSError, yaml.YAMLError) as e:
            print_error(f"Erro ao restaurar: {e}")
            return False

        print_success("Restauração concluída!")
        return True

    def clean_hooks_dir(self, tool: Tool) -> bool:
        hooks_dir = self.project_root / tool.directory

        if not hooks_dir.exists():
            print_warning(f"Diretório de hooks não existe: {tool.directory}")
            return False

        shutil.rmtree(hooks_dir)
        print_success(f"Diretório de hooks removido: {tool.directory}")
        return True

    # -------------------------------------------------------------------------
    # uninstall
    # -------------------------------------------------------------------------

    def uninstall(self) -> bool:
        """Remove ferramenta, diretórios, automações injetadas e a configuração."""
        if not self.store.exists():
            print_error(NOT_INITIALIZED_MESSAGE)
            return False

        try:
            tool = self.store.load().name

            if tool is Tool.LEFTHOOK:
                self._run_tolerant(["npx", "lefthook", "uninstall"])

            self.uninstall_package(tool)

            if tool.manages_hooks_path:
                self._run_tolerant(["git", "config", "--unset", "core.hooksPath"])

            self.clean_hooks_dir(tool)

            if tool is Tool.LEFTHOOK and self.lefthook_config_path.exists():
                self.lefthook_config_path.unlink()
                print_success(f"{LEFTHOOK_CONFIG_NAME} removido.")

            self.strip_manifest_scripts()
            self.store.delete()

        except (HookPilotError, OSError) as e:
            print_error(f"Erro ao desinstalar: {e}")
            return False

        print_success("Toda a configuração e os arquivos gerados foram removidos.")
        return True

    def uninstall_package(self, tool: Tool):
        if not tool.package or not self.manifest_path.exists():
            return

        print_info(f"Removendo {tool.package}...", icon="📦")
        self.runner.run(["npm", "uninstall", tool.package])
        print_success(f"{tool.package} removido.")

    def strip_manifest_scripts(self):
        if not self.manifest_path.exists():
            return

        manifest = read_manifest(self.manifest_path)
        write_manifest(self.manifest_path, strip_setup_scripts(manifest))
        print_success(f"Scripts de setup removidos do {PACKAGE_MANIFEST_NAME}.")

    def _run_tolerant(self, cmd):
        """Executa comando cuja falha indica só ausência (ex: chave git inexistente)."""
        try:
            self.runner.run(cmd)
        except CommandError as e:
            print_warning(f"{' '.join(cmd)}: {e}")


__all__ = [
    "ToolManager",
    "DEFAULT_LEFTHOOK_CONFIG",
]
