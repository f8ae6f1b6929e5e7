"""
PresetLibrary - persisted shape of the preset collection.

Serialization format:
{
    "_version": 1,
    "presets": [
        {"presetName": "walk cycle", "entries": [{"tagName": "idle", "repetitions": 2}]}
    ],
    "lastUsed": {"presetName": "None", "entries": [...]}   // or null
}

Version 0 is the preference table written by the original editor plugin:
{
    "presets": [{"preset": "walk cycle", "tags": [{"name": "idle", "repetitions": 2}]}],
    "last_open": {"preset": "None", "tags": [...]}
}
"""

import logging
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models import NO_PRESET, Sequence

logger = logging.getLogger(__name__)


def _migrate_legacy_sequence(data: Optional[dict[str, Any]]) -> Optional[dict[str, Any]]:
    if data is None or 'entries' in data:
        return data
    entries = []
    # Lua tables without array entries serialize as {} rather than []
    tags = data.get('tags') or []
    if isinstance(tags, dict):
        tags = list(tags.values())
    preset_name = data.get('preset', NO_PRESET)
    for tag in tags:
        if not isinstance(tag, dict):
            logger.warning(f"Dropping unreadable entry {tag!r} of preset {preset_name!r}")
            continue
        try:
            repetitions = int(tag.get('repetitions', 1))
        except (TypeError, ValueError, OverflowError):
            repetitions = 0
        if repetitions < 1:
            # The plugin's edit dialog allowed zero repetitions
            logger.warning(
                f"Dropping entry {tag.get('name', '')!r} of preset {preset_name!r}: "
                f"invalid repetitions {tag.get('repetitions')!r}"
            )
            continue
        entries.append({
            'tagName': tag.get('name', ''),
            'repetitions': repetitions,
        })
    return {
        'presetName': preset_name,
        'entries': entries,
    }


class PresetLibrary(BaseModel):
    """All stored presets plus the last-used sequence snapshot."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra='ignore',
    )

    VERSION: ClassVar[int] = 1

    version: int = Field(default=1, alias='_version')
    presets: list[Sequence] = Field(default_factory=list)
    last_used: Optional[Sequence] = Field(default=None, alias='lastUsed')

    def to_api_dict(self) -> dict[str, Any]:
        data = self.model_dump(by_alias=True, mode='json')
        data['_version'] = self.VERSION
        return data

    @classmethod
    def migrate(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Migrate serialized data from older versions.

        Args:
            data: Serialized library data

        Returns:
            Migrated data at current version
        """
        version = data.get('_version', 0)

        # v0 -> v1: original plugin preferences
        if version < 1:
            presets = data.get('presets') or []
            if isinstance(presets, dict):
                presets = list(presets.values())
            data = {
                '_version': 1,
                'presets': [
                    _migrate_legacy_sequence(preset) for preset in presets
                    if isinstance(preset, dict)
                ],
                'lastUsed': _migrate_legacy_sequence(
                    data.get('lastUsed', data.get('last_open'))
                ),
            }

        return data

    @classmethod
    def from_api_dict(cls, data: dict[str, Any]) -> 'PresetLibrary':
        data = cls.migrate(data)
        return cls.model_validate(data)
