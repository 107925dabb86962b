"""
Rule string parsing.

A rule string is a pipe-delimited list of tokens ("required|max_chars:20").
A token is a rule name optionally followed by ``:`` and comma-delimited
parameters. Parsing never raises and never checks parameter counts.
"""

from rulecheck.core.models import ParsedRule

RULE_SEPARATOR = "|"
PARAMS_SEPARATOR = ":"
PARAM_SEPARATOR = ","


def split_rules(rule_string: str) -> list[str]:
    """Split a rule string into its tokens, in declaration order."""
    return rule_string.split(RULE_SEPARATOR)


def split_rule_params(token: str) -> ParsedRule:
    """
    Split one rule token into name and parameters.

    Only a token with exactly one ``:`` carries parameters. A token with
    more than one colon is kept whole as a parameterless rule name, which
    normally matches no registered rule.

    Examples:
        >>> split_rule_params("chars_between:5,10")
        ParsedRule(name='chars_between', params=['5', '10'])
        >>> split_rule_params("required")
        ParsedRule(name='required', params=[])
        >>> split_rule_params("date:%H:%M")
        ParsedRule(name='date:%H:%M', params=[])
    """
    parts = token.split(PARAMS_SEPARATOR)
    if len(parts) == 2:
        return ParsedRule(name=parts[0], params=parts[1].split(PARAM_SEPARATOR))
    return ParsedRule(name=token, params=[])
