"""
Config-driven loss selection.

Wraps the factory so a loss can be picked from a plain config value.
"""
import logging
from typing import Optional

from .base import Loss, LossKind, is_integer_tag
from .factory import create

logger = logging.getLogger(__name__)

_BY_NAME = {}
for _kind in LossKind:
    _BY_NAME[_kind.name.lower()] = _kind
    _BY_NAME[_kind.display_name.lower()] = _kind


def parse_kind(value) -> Optional[LossKind]:
    """
    Resolve a configured loss tag to a LossKind.

    Supports:
    1. LossKind member: LossKind.HINGE
    2. Integer value: 3
    3. Enum member name, any case: 'SQUARED_HINGE', 'squared_hinge'
    4. Display name, any case: 'SquaredHinge', 'crossentropy'

    Returns None when the value names no known loss.
    """
    if isinstance(value, LossKind):
        return value
    if is_integer_tag(value):
        try:
            return LossKind(int(value))
        except ValueError:
            return None
    if isinstance(value, str):
        return _BY_NAME.get(value.strip().lower())
    return None


def get_loss(loss_config) -> Loss:
    """
    Get loss function from config.

    Supports:
    1. Plain tag: 'hinge', LossKind.HINGE, 3
    2. Dict with name: {'name': 'hinge'}

    Args:
        loss_config: Loss configuration (tag or dict)

    Returns:
        Loss instance. Tags that name no known loss fall back to SquareLoss.

    Raises:
        ValueError: dict config without a 'name' key
        TypeError: config of any other type
    """
    if isinstance(loss_config, dict):
        if 'name' not in loss_config:
            raise ValueError(
                f"Loss config dict must have 'name' key. Got: {loss_config}"
            )
        tag = loss_config['name']
    elif isinstance(loss_config, str) or is_integer_tag(loss_config):
        tag = loss_config
    else:
        raise TypeError(
            f"Invalid loss config type: {type(loss_config)}. "
            f"Expected tag or dict, got: {loss_config}"
        )

    kind = parse_kind(tag)
    if kind is None:
        logger.debug("Loss config %r did not resolve to a LossKind", tag)
        return create(tag)
    return create(kind)
