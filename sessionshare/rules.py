"""Ordered secret-detection rules for sessionshare.

Rules run top to bottom, each over the output of the previous one. Structural
and vendor-specific rules come first so the generic catch-alls at the end only
see what is left.
"""

import enum
import re
from dataclasses import dataclass

REDACTION_MARKER = "[REDACTED]"


class Policy(enum.Enum):
    """How a rule turns a match into redacted text."""

    BLOCK = "block"  # replace the whole match, no questions asked
    WHOLE = "whole"  # replace the whole match if it looks like a token
    PREFIX = "prefix"  # keep everything before the last group, redact the group


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: re.Pattern
    policy: Policy
    min_length: int


_DEFAULT_MIN_LENGTH = {
    Policy.BLOCK: 0,
    Policy.WHOLE: 16,
    Policy.PREFIX: 8,
}


def _rule(
    name: str,
    regex: str,
    policy: Policy | None = None,
    min_length: int | None = None,
    flags: int = 0,
) -> Rule:
    pattern = re.compile(regex, flags | re.ASCII)
    if policy is None:
        policy = Policy.PREFIX if pattern.groups >= 2 else Policy.WHOLE
    if min_length is None:
        min_length = _DEFAULT_MIN_LENGTH[policy]
    return Rule(name, pattern, policy, min_length)


_I = re.IGNORECASE

# Separator between a keyword and its value: optional quotes/space around = or :
_ASSIGN = r"""[\s'"]*[:=][\s'"]*"""

PRIVATE_KEY_RULES = (
    _rule(
        "private_key_block",
        r"-----BEGIN (?:[A-Z0-9]+ )*PRIVATE KEY-----[\s\S]*?-----END (?:[A-Z0-9]+ )*PRIVATE KEY-----",
        Policy.BLOCK,
    ),
)

CREDENTIAL_URL_RULES = (
    # The password runs up to the last "@" before the host, so it may contain "@".
    _rule(
        "credential_url",
        r"\b([a-zA-Z][a-zA-Z0-9+.\-]*://[^/\s:@]*:)([^\s/]+)(?=@[^\s/@]+)",
        Policy.PREFIX,
        min_length=1,
    ),
)

VENDOR_RULES = (
    _rule("anthropic_key", r"\bsk-ant-[a-zA-Z0-9_\-]{20,}\b"),
    _rule("openai_project_key", r"\bsk-proj-[a-zA-Z0-9_\-]{20,}\b"),
    _rule("openai_key", r"\bsk-[a-zA-Z0-9]{20,}\b"),
    _rule("publishable_key", r"\bpk-[a-zA-Z0-9]{20,}\b"),
    _rule("resend_key", r"\bre_[a-zA-Z0-9]{20,}\b"),
    _rule("loops_key", r"\bloops_[a-zA-Z0-9]{20,}\b", flags=_I),
    _rule("jwt", r"\beyJ[a-zA-Z0-9_\-]{10,}\.[a-zA-Z0-9_\-]{10,}\.[a-zA-Z0-9_\-]{10,}\b"),
    _rule("aws_access_key_id", r"\b(?:AKIA|ASIA)[0-9A-Z]{16}\b"),
    _rule("github_token", r"\bgh[pousc]_[a-zA-Z0-9]{36}\b"),
    _rule("github_fine_grained_pat", r"\bgithub_pat_[a-zA-Z0-9_]{22,}\b"),
    _rule("gitlab_pat", r"\bglpat-[a-zA-Z0-9_\-]{20,}\b"),
    _rule("stripe_key", r"\b(?:sk|pk)_(?:live|test)_[a-zA-Z0-9]{20,}\b"),
    _rule("stripe_webhook_secret", r"\bwhsec_[a-zA-Z0-9]{20,}\b"),
    _rule("slack_token", r"\bxox[baprs]-[A-Za-z0-9\-]{10,}\b"),
    _rule("slack_app_token", r"\bxapp-[A-Za-z0-9\-]{10,}\b"),
    _rule("sendgrid_key", r"\bSG\.[A-Za-z0-9_\-]{20,}\.[A-Za-z0-9_\-]{20,}\b"),
    _rule("mailgun_key", r"\bkey-[a-z0-9]{32}\b", flags=_I),
    _rule("twilio_key", r"\bSK[a-zA-Z0-9]{32}\b"),
    _rule("npm_token", r"\bnpm_[A-Za-z0-9]{36}\b"),
    _rule("google_api_key", r"\bAIza[0-9A-Za-z_\-]{35}\b"),
    _rule("google_refresh_token", r"\b1//[0-9A-Za-z_\-]{20,}\b"),
    _rule(
        "slack_webhook",
        r"\bhttps?://hooks\.slack\.com/services/[A-Za-z0-9/]{10,}\b",
        Policy.BLOCK,
    ),
    _rule(
        "discord_webhook",
        r"\bhttps?://(?:discord\.com|discordapp\.com)/api/webhooks/\d+/[A-Za-z0-9_\-]+\b",
        Policy.BLOCK,
        flags=_I,
    ),
    _rule("azure_sas_signature", r"\b(sig=)([A-Za-z0-9%/+=]{20,})", min_length=20, flags=_I),
    _rule(
        "azure_storage_account_key",
        r"\b(DefaultEndpointsProtocol=[^;]+;AccountName=[^;]+;AccountKey=)([^;\s'\"]+)",
        flags=_I,
    ),
)

KEYWORD_RULES = (
    _rule(
        "token_field",
        r"\b((?:access[_-]?token|refresh[_-]?token|id[_-]?token|client[_-]?secret"
        r"|private[_-]?key(?:_id)?|session[_-]?token|oauth[_-]?token|_?auth[_-]?token)"
        r"""[\s'":=]+)([^\s'"]{8,})""",
        flags=_I,
    ),
    _rule(
        "aws_secret_access_key",
        r"""\b(aws[_-]?secret[_-]?access[_-]?key[\s'":=]+)([\w/+=]{30,})""",
        min_length=30,
        flags=_I,
    ),
    _rule(
        "aws_session_token",
        r"""\b(aws[_-]?session[_-]?token[\s'":=]+)([\w/+=]{16,})""",
        min_length=16,
        flags=_I,
    ),
    _rule(
        "env_secret_assignment",
        r"""\b([A-Za-z][A-Za-z0-9_]*(?:KEY|SECRET|TOKEN|PASSWORD|CREDENTIAL)[A-Za-z0-9_]*)\s*=\s*['"]?([^\s'"&|;]+)""",
        flags=_I,
    ),
    _rule(
        "env_api_assignment",
        r"""\b([A-Za-z][A-Za-z0-9_]*(?:API|AUTH)[A-Za-z0-9_]*)\s*=\s*['"]?([^\s'"&|;]+)""",
        flags=_I,
    ),
    _rule(
        "export_assignment",
        r"""\b(export\s+[A-Za-z][A-Za-z0-9_]*)\s*=\s*['"]?([^\s'"&|;]{8,})""",
        flags=_I,
    ),
    _rule("api_key", r"""\b(api[_-]?keys?[\s'":=]+)([\w\-]{16,})""", min_length=16, flags=_I),
    _rule("api_secret", r"""\b(api[_-]?secret[\s'":=]+)([\w\-]{16,})""", min_length=16, flags=_I),
    _rule("bearer_token", r"\b(bearer\s+)([a-zA-Z0-9_\-.]{20,})", min_length=20, flags=_I),
    _rule("password", r"""\b(password""" + _ASSIGN + r""")([^\s'"]{8,})""", flags=_I),
    _rule("secret", r"\b(secret" + _ASSIGN + r")([\w\-]{12,})", min_length=12, flags=_I),
    _rule("token", r"\b(token" + _ASSIGN + r")([\w\-.]{16,})", min_length=16, flags=_I),
    _rule("key", r"\b(key" + _ASSIGN + r")([\w\-]{20,})", min_length=20, flags=_I),
    # "the API key is ...", "my token: ..."
    _rule(
        "possessive_secret",
        r"\b(my|the|your|this)\s+(api[_\s-]?key|secret|token|password)((?:\s+(?:is|was))?[\s:=]+)(\S{12,})",
        min_length=12,
        flags=_I,
    ),
    # "set your token to ...", "paste the key into .env: ...". The middle spans
    # stop at brackets so a match never reaches past an earlier marker.
    _rule(
        "instructed_secret",
        r"""\b(add|set|use|put|enter|paste|copy)\s+[^.\n\[\]]*?(key|secret|token|password)[^.\n\[\]]*?[\s:'"]+([a-zA-Z0-9_\-]{16,})""",
        min_length=16,
        flags=_I,
    ),
)

GENERIC_RULES = (
    _rule("long_token", r"\b[a-zA-Z0-9_\-]{40,}\b", min_length=40),
    _rule("hex_string", r"\b[a-f0-9]{32,}\b", min_length=32, flags=_I),
    _rule("base64_string", r"\b[A-Za-z0-9+/]{40,}={0,2}\b", min_length=40),
)

RULES: tuple[Rule, ...] = (
    PRIVATE_KEY_RULES
    + CREDENTIAL_URL_RULES
    + VENDOR_RULES
    + KEYWORD_RULES
    + GENERIC_RULES
)
