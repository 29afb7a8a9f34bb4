"""
HOOKPILOT - Core Data Models
Estruturas de dados fundamentais: ferramentas, configuração e catálogo.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Dict, Any, Optional, Tuple, Union
from enum import Enum


# =============================================================================
# Exceptions
# =============================================================================

class HookPilotError(Exception):
    """Erro base do HOOKPILOT."""
    pass


class ConfigError(HookPilotError):
    """Arquivo de configuração ausente, corrompido ou inválido."""
    pass


# =============================================================================
# Enums
# =============================================================================

class Tool(str, Enum):
    """Ferramentas de gerenciamento de hooks suportadas."""
    GIT = "git"
    HUSKY = "husky"
    LEFTHOOK = "lefthook"

    @classmethod
    def parse(cls, value: Any) -> "Tool":
        """
        Converte um nome de ferramenta para o enum.

        Aceita qualquer capitalização ("Lefthook", "HUSKY"); a forma canônica
        é sempre minúscula.

        Raises:
            ConfigError: Se o nome não for uma ferramenta conhecida
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass

        raise ConfigError(
            f"Ferramenta desconhecida: {value!r}. "
            f"Valores válidos: {[t.value for t in cls]}"
        )

    @property
    def directory(self) -> str:
        """Diretório (relativo à raiz do projeto) onde ficam os scripts."""
        return TOOL_DIRECTORIES[self]

    @property
    def package(self) -> Optional[str]:
        """Pacote npm da ferramenta (None para hooks nativos)."""
        return TOOL_PACKAGES[self]

    @property
    def manages_hooks_path(self) -> bool:
        """Se a ferramenta depende de `core.hooksPath` apontando para seu diretório."""
        return self in (Tool.GIT, Tool.HUSKY)

    @property
    def writes_hook_files(self) -> bool:
        """Lefthook é configurado via YAML, nunca por scripts avulsos."""
        return self is not Tool.LEFTHOOK

    @property
    def label(self) -> str:
        return TOOL_LABELS[self]


TOOL_DIRECTORIES: Dict[Tool, str] = {
    Tool.GIT: ".git-hooks",
    Tool.HUSKY: ".husky",
    Tool.LEFTHOOK: ".lefthook",
}

TOOL_PACKAGES: Dict[Tool, Optional[str]] = {
    Tool.GIT: None,
    Tool.HUSKY: "husky",
    Tool.LEFTHOOK: "lefthook",
}

TOOL_LABELS: Dict[Tool, str] = {
    Tool.GIT: "Git (hooks nativos)",
    Tool.HUSKY: "Husky",
    Tool.LEFTHOOK: "Lefthook",
}


def hook_path(tool: Tool, hook_type: str, project_root: Path) -> Optional[Path]:
    """
    Resolve onde o script de um hook deve ficar para a ferramenta ativa.

    Args:
        tool: Ferramenta ativa
        hook_type: Nome do hook (pre-commit, commit-msg, ...)
        project_root: Raiz do projeto

    Returns:
        Caminho do script, ou None quando a ferramenta não usa arquivos (Lefthook)

    Raises:
        ConfigError: Se o nome do hook não for um nome de arquivo simples
    """
    if (
        not hook_type
        or hook_type in (".", "..")
        or "/" in hook_type
        or "\\" in hook_type
    ):
        raise ConfigError(f"Nome de hook inválido: {hook_type!r}")

    if not tool.writes_hook_files:
        return None
    return Path(project_root) / tool.directory / hook_type


# =============================================================================
# Configuration Record
# =============================================================================

@dataclass
class HooksConfig:
    """
    Registro persistido em hooks-config.json.

    `hooks` mantém a ordem de inserção sem duplicatas e cada hook listado
    possui uma entrada em `config`.
    """
    name: Tool
    directory: str
    hooks: List[str] = field(default_factory=list)
    config: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def __post_init__(self):
        """Normaliza ferramenta e garante consistência entre hooks e config."""
        self.name = Tool.parse(self.name)

        unique: List[str] = []
        for hook in self.hooks:
            if hook not in unique:
                unique.append(hook)
        self.hooks = unique

        self.config = {
            hook: self.config.get(hook) or {}
            for hook in self.hooks
        }

    @classmethod
    def for_tool(cls, tool: Tool) -> "HooksConfig":
        """Cria registro vazio para uma ferramenta."""
        return cls(name=tool, directory=tool.directory)

    @classmethod
    def from_dict(cls, data: Any) -> "HooksConfig":
        """
        Constrói o registro a partir do JSON já parseado.

        Raises:
            ConfigError: Se a estrutura não for a esperada
        """
        if not isinstance(data, dict):
            raise ConfigError("Configuração deve conter um objeto no nível raiz")

        if "name" not in data:
            raise ConfigError("Campo 'name' não encontrado na configuração")

        tool = Tool.parse(data["name"])

        hooks = data.get("hooks", [])
        if not isinstance(hooks, list) or not all(isinstance(h, str) for h in hooks):
            raise ConfigError("Campo 'hooks' deve ser uma lista de nomes")

        config = data.get("config", {})
        if not isinstance(config, dict):
            raise ConfigError("Campo 'config' deve ser um objeto")

        return cls(
            name=tool,
            directory=data.get("directory") or tool.directory,
            hooks=list(hooks),
            config=dict(config),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serializa o registro completo (ordem de chaves estável)."""
        return {
            "name": self.name.value,
            "directory": self.directory,
            "hooks": list(self.hooks),
            "config": {hook: self.config.get(hook, {}) for hook in self.hooks},
        }


# =============================================================================
# Template Catalog
# =============================================================================

@dataclass(frozen=True)
class TemplateCatalog:
    """Catálogo estático: tipo de hook -> templates compatíveis."""
    entries: Tuple[Tuple[str, Tuple[str, ...]], ...]

    @property
    def hook_types(self) -> List[str]:
        return [hook_type for hook_type, _ in self.entries]

    def templates_for(self, hook_type: str) -> List[str]:
        """Templates compatíveis com o hook (lista vazia se desconhecido)."""
        for name, templates in self.entries:
            if name == hook_type:
                return list(templates)
        return []

    def is_compatible(self, hook_type: str, template_id: str) -> bool:
        return template_id in self.templates_for(hook_type)

    def __contains__(self, hook_type: object) -> bool:
        return hook_type in self.hook_types


# =============================================================================
# Generated Template
# =============================================================================

@dataclass
class GeneratedTemplate:
    """Conteúdo gerado de um hook e os parâmetros que devem ser persistidos."""
    template_id: str
    content: Union[str, bytes]
    params: Dict[str, Any] = field(default_factory=dict)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Exceptions
    "HookPilotError",
    "ConfigError",

    # Tools
    "Tool",
    "TOOL_DIRECTORIES",
    "TOOL_PACKAGES",
    "TOOL_LABELS",
    "hook_path",

    # Core models
    "HooksConfig",
    "TemplateCatalog",
    "GeneratedTemplate",
]
