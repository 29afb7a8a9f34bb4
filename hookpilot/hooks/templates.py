"""
HOOKPILOT - Built-in Hook Templates
Corpos de script dos templates embutidos.
"""

import shlex
from string import Template
from typing import Dict


# =============================================================================
# Hook Templates
# =============================================================================

LINT_TEMPLATE = """#!/bin/sh
# HOOKPILOT $hook_type hook (lint)
# Auto-generated - re-run 'hookpilot add' to change

echo "🔍 Running lint..."
$command
status=$$?

if [ $$status -ne 0 ]; then
    echo "❌ Lint failed. Fix the issues above before continuing."
    exit $$status
fi
"""

TEST_TEMPLATE = """#!/bin/sh
# HOOKPILOT $hook_type hook (test)
# Auto-generated - re-run 'hookpilot add' to change

echo "🧪 Running tests..."
$command
status=$$?

if [ $$status -ne 0 ]; then
    echo "❌ Tests failed."
    exit $$status
fi
"""

COMMIT_MSG_CONVENTIONAL_TEMPLATE = """#!/bin/sh
# HOOKPILOT $hook_type hook (commit-msg-conventional)
# Auto-generated - re-run 'hookpilot add' to change

commit_msg_file="$$1"
commit_msg=$$(head -n 1 "$$commit_msg_file")
pattern=$pattern

if ! echo "$$commit_msg" | grep -Eq "$$pattern"; then
    echo "❌ Invalid commit message: $$commit_msg"
    echo "   Expected Conventional Commits, e.g. 'feat(api): add endpoint'"
    exit 1
fi
"""

INSTALL_DEPS_TEMPLATE = """#!/bin/sh
# HOOKPILOT $hook_type hook (install-deps)
# Auto-generated - re-run 'hookpilot add' to change

changed=$$(git diff-tree -r --name-only --no-commit-id $diff_range 2>/dev/null)

if echo "$$changed" | grep -Eq $watch; then
    echo "📦 Dependencies changed, running:" $command_text
    $command
fi
"""

TEMPLATE_BODIES: Dict[str, str] = {
    "lint": LINT_TEMPLATE,
    "test": TEST_TEMPLATE,
    "commit-msg-conventional": COMMIT_MSG_CONVENTIONAL_TEMPLATE,
    "install-deps": INSTALL_DEPS_TEMPLATE,
}

TEMPLATE_LABELS: Dict[str, str] = {
    "lint": "Linting (npm run lint)",
    "test": "Unit Tests (npm test)",
    "commit-msg-conventional": "Commit Message Check (Conventional Commits)",
    "install-deps": "Install dependencies when lockfiles change",
    "custom": "Custom (use your own script)",
}

CONVENTIONAL_COMMIT_PATTERN = (
    r"^(build|chore|ci|docs|feat|fix|perf|refactor|revert|style|test)"
    r"(\([a-z0-9 ._-]+\))?!?: .+"
)

# Parâmetros perguntados na geração: template -> {parâmetro: (pergunta, default)}
TEMPLATE_PARAMS = {
    "lint": {"command": ("Comando de lint", "npm run lint")},
    "test": {"command": ("Comando de testes", "npm test")},
    "commit-msg-conventional": {
        "pattern": ("Regex da mensagem de commit", CONVENTIONAL_COMMIT_PATTERN),
    },
    "install-deps": {
        "command": ("Comando de instalação", "npm install"),
        "watch": ("Regex dos arquivos observados", r"package(-lock)?\.json|yarn\.lock|pnpm-lock\.yaml"),
    },
}

CUSTOM_TEMPLATE = "custom"

# Respostas que entram no script como literais de shell; `command` entra cru
QUOTED_PARAMS = ("pattern", "watch")

# post-checkout recebe os refs em $1/$2; ORIG_HEAD só vale após merge/rebase
DIFF_RANGES = {
    "post-checkout": '"$1" "$2"',
}
DEFAULT_DIFF_RANGE = "ORIG_HEAD HEAD"


def render_template(template_id: str, hook_type: str, params: Dict[str, str]) -> str:
    """
    Monta o script de um template embutido.

    Raises:
        KeyError: Se o template não for embutido ou faltar parâmetro
    """
    body = TEMPLATE_BODIES[template_id]

    values = dict(params)
    for name in QUOTED_PARAMS:
        if name in values:
            values[name] = shlex.quote(str(values[name]))
    if "command" in values:
        values["command_text"] = shlex.quote(str(values["command"]))

    return Template(body).substitute(
        values,
        hook_type=hook_type,
        diff_range=DIFF_RANGES.get(hook_type, DEFAULT_DIFF_RANGE),
    )


def template_label(template_id: str) -> str:
    return TEMPLATE_LABELS.get(template_id, template_id)


__all__ = [
    "TEMPLATE_BODIES",
    "TEMPLATE_LABELS",
    "TEMPLATE_PARAMS",
    "CONVENTIONAL_COMMIT_PATTERN",
    "CUSTOM_TEMPLATE",
    "render_template",
    "template_label",
]
