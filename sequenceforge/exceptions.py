"""Exception classes for sequence building and preset handling."""


class SequenceForgeError(Exception):
    """Base exception for sequenceforge errors."""

    pass


class NoTagsError(SequenceForgeError):
    """Raised when a document defines no tags, so there is nothing to sequence."""

    def __init__(self, document_name: str = ''):
        self.document_name = document_name
        message = 'You cannot use this option if there are no tags defined.'
        if document_name:
            message = f'{message} ({document_name})'
        super().__init__(message)


class MissingTagsError(SequenceForgeError):
    """Raised when a preset references tags the current document does not have."""

    def __init__(self, preset_name: str, missing_tags: tuple[str, ...]):
        self.preset_name = preset_name
        self.missing_tags = tuple(missing_tags)
        super().__init__(
            f'Preset {preset_name!r} cannot be used since the current document '
            f'does not have all of the tags it needs. Missing tags: '
            f'{", ".join(self.missing_tags)}'
        )


class UnknownTagError(SequenceForgeError, KeyError):
    """Raised when a sequence entry names a tag absent from the extracted frames."""

    def __init__(self, tag_name: str):
        self.tag_name = tag_name
        super().__init__(tag_name)

    def __str__(self) -> str:
        return f'Unknown tag: {self.tag_name!r}'


class InvalidRepetitionError(SequenceForgeError, ValueError):
    """Raised for repetition counts below one."""

    def __init__(self, repetitions):
        self.repetitions = repetitions
        super().__init__(f'Repetitions must be a positive integer, got {repetitions!r}')


class NotFoundError(SequenceForgeError, KeyError):
    """Raised when a preset name is not in the store."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f'Preset not found: {self.name!r}'


class InvalidPresetNameError(SequenceForgeError, ValueError):
    """Raised when saving under a blank name or the reserved "None" name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Invalid preset name: {name!r}')


class PresetStorageError(SequenceForgeError):
    """Raised when the preset backend cannot read or write its data."""

    pass


class UnknownLayerGroupError(SequenceForgeError, ValueError):
    """Raised when an export names a layer group the document does not have."""

    def __init__(self, layer_group: str):
        self.layer_group = layer_group
        super().__init__(f'Unknown layer group: {layer_group!r}')
