from __future__ import annotations
from typing import Iterable, Union

from textkit.core.case_joining.config import JoinPolicy
from textkit.core.tokenization.base import WordToken


def join_tokens(tokens: Iterable[Union[WordToken, str]], policy: JoinPolicy) -> str:
    """
    Case each token by position and join with the policy separator.
    Token 0 gets `first_token_case`, every later token `rest_token_case`.
    """
    parts = []
    for i, token in enumerate(tokens):
        text = token.text if isinstance(token, WordToken) else str(token)
        rule = policy.first_token_case if i == 0 else policy.rest_token_case
        parts.append(rule.apply(text))
    return policy.separator.join(parts)
