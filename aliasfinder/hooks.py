"""Shell integration: wrapper function plus the pre-execution hook for automatic mode.

The Python process cannot see the calling shell's aliases, so the generated
script pipes the live `alias` table into the console script on every call.
"""

SHELLS = ("bash", "zsh")

_COMMON = """\
# alias-finder shell integration. Load with: eval "$({exe} --print-hook {shell})"
alias-finder() {{
  alias | command {exe} --from - "$@"
}}

_alias_finder_automatic_enabled() {{
  case "${{ALIAS_FINDER_AUTOMATIC:-}}" in
    [Tt][Rr][Uu][Ee]) return 0 ;;
  esac
  return 1
}}

alias-finder-preexec() {{
  _alias_finder_automatic_enabled || return 0
  [ -n "${{1:-}}" ] || return 0
  alias | command {exe} --from - --automatic -- "$1" 2>/dev/null || true
}}
"""

_BASH_REGISTER = """\
if _alias_finder_automatic_enabled; then
  if declare -p preexec_functions >/dev/null 2>&1; then
    case " ${preexec_functions[*]} " in
      *" alias-finder-preexec "*) ;;
      *) preexec_functions+=(alias-finder-preexec) ;;
    esac
  elif [ -z "${_ALIAS_FINDER_WARNED:-}" ]; then
    _ALIAS_FINDER_WARNED=1
    printf 'Warning: ALIAS_FINDER_AUTOMATIC is enabled but bash-preexec is not loaded.\\n' >&2
    printf 'Please source bash-preexec.sh before loading alias-finder.\\n' >&2
    printf 'Download from: https://github.com/rcaloras/bash-preexec\\n' >&2
  fi
fi
"""

_ZSH_REGISTER = """\
if _alias_finder_automatic_enabled; then
  autoload -Uz add-zsh-hook
  add-zsh-hook preexec alias-finder-preexec
fi
"""


def script(shell: str = "bash", executable: str = "alias-finder") -> str:
    """Return the integration script for `shell`."""
    if shell not in SHELLS:
        raise ValueError(f"Unsupported shell {shell!r}; expected one of {', '.join(SHELLS)}")
    register = _BASH_REGISTER if shell == "bash" else _ZSH_REGISTER
    return _COMMON.format(exe=executable, shell=shell) + "\n" + register
