"""Settings merge engine.

Folds the global Claude Code settings together with an ordered collection
of per-project local settings. Ordinary fields are overlaid so that the
last source wins; each kind under ``permissions`` is merged as the sorted,
de-duplicated union of every valid list seen so far.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Tuple, Union

from ..models.settings import MergeSettingsResult
from .constants import ALLOW_KIND, PERMISSIONS_KEY

logger = logging.getLogger(__name__)

Settings = Dict[str, Any]
LocalSettingsRecord = Union[Mapping[str, Settings], Iterable[Tuple[str, Settings]]]


def is_permission_list(value: Any) -> bool:
    """Check whether a value is a list of strings.

    Strings themselves and mappings are rejected even though they are
    iterable. An empty list is valid.
    """
    if not isinstance(value, (list, tuple)):
        return False
    return all(isinstance(item, str) for item in value)


def _permissions_of(settings: Settings) -> Mapping[str, Any]:
    """Return the permissions mapping of a settings object, or an empty one."""
    permissions = settings.get(PERMISSIONS_KEY)
    if isinstance(permissions, Mapping):
        return permissions
    if permissions is not None:
        logger.debug("Ignoring non-mapping permissions value: %r", permissions)
    return {}


def _record_items(local_settings_record: LocalSettingsRecord) -> Iterable[Tuple[str, Settings]]:
    if isinstance(local_settings_record, Mapping):
        return local_settings_record.items()
    return local_settings_record


def _merge_permission_lists(*values: Any) -> List[str]:
    commands: Dict[str, None] = {}
    for value in values:
        if value is None:
            continue
        if not is_permission_list(value):
            logger.debug("Ignoring invalid permission list: %r", value)
            continue
        commands.update(dict.fromkeys(value))
    return sorted(commands)


def merge_settings(
    settings: Settings,
    local_settings_record: LocalSettingsRecord,
    show_allow_commands: bool = False,
) -> MergeSettingsResult:
    """Merge global settings with multiple project-specific local settings.

    For each local settings object, in order:

    - Fields other than ``permissions`` are overwritten by the local value.
    - Every permission kind present on either side becomes the sorted union
      of both sides' lists, without duplicates. Values that are not lists
      of strings contribute nothing.

    Args:
        settings: Base global settings
        local_settings_record: Ordered ``(source, settings)`` pairs, or a
            mapping iterated in insertion order
        show_allow_commands: Collect ``"<source>\\t<command>"`` lines for
            every valid ``allow`` entry

    Returns:
        MergeSettingsResult with the merged settings and collected lines
    """
    merged_allow_commands: List[str] = []
    settings = dict(settings)

    for source, local_settings in _record_items(local_settings_record):
        local_permissions = local_settings.get(PERMISSIONS_KEY)

        # Collect allowed commands for debugging output
        if show_allow_commands and isinstance(local_permissions, Mapping):
            allow_commands = local_permissions.get(ALLOW_KIND)
            if is_permission_list(allow_commands):
                merged_allow_commands.extend(f"{source}\t{command}" for command in allow_commands)

        before = settings
        settings = {**before, **local_settings}

        permissions_list = [_permissions_of(before), _permissions_of(local_settings)]
        kinds = dict.fromkeys(key for permissions in permissions_list for key in permissions)
        if not kinds:
            continue

        # Never write into a permissions mapping owned by one of the inputs
        overlaid = settings.get(PERMISSIONS_KEY)
        merged_permissions = dict(overlaid) if isinstance(overlaid, Mapping) else {}
        for kind in kinds:
            merged_permissions[kind] = _merge_permission_lists(
                *(permissions.get(kind) for permissions in permissions_list)
            )
        settings[PERMISSIONS_KEY] = merged_permissions

        logger.debug("Merged settings from %s (%d permission kinds)", source, len(kinds))

    return MergeSettingsResult(settings=settings, merged_allow_commands=merged_allow_commands)
