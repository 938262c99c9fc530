from typing import Any, List, Mapping, Optional, Sequence

from ..models.errors import MissingParametersError


def get_missing_params(
    params: Optional[Mapping[str, Any]], required: Sequence[str]
) -> List[str]:
    """Return the required parameter names that have no usable value.

    A name counts as missing when it is absent or bound to ``None``. When
    ``params`` itself is ``None`` every required name is reported.
    """
    if params is None:
        return list(required)
    return [name for name in required if params.get(name) is None]


def validate_params(
    params: Optional[Mapping[str, Any]], required: Sequence[str]
) -> None:
    missing = get_missing_params(params, required)
    if missing:
        raise MissingParametersError(missing)
