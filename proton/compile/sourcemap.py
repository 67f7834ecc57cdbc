"""
Version 3 source maps.

Mappings are kept as (generated, original, source, name) entries and only
encoded into the base64 VLQ `mappings` string on serialisation.
"""
import json
from string import ascii_lowercase, ascii_uppercase, digits
from typing import NamedTuple, Optional, Tuple

BASE64 = ascii_uppercase + ascii_lowercase + digits + '+/'
VLQ_SHIFT = 5
VLQ_MASK = (1 << VLQ_SHIFT) - 1
VLQ_CONTINUATION = 1 << VLQ_SHIFT


def encode_vlq(value):
    vlq = ((-value) << 1) | 1 if value < 0 else value << 1
    chars = []
    while True:
        digit = vlq & VLQ_MASK
        vlq >>= VLQ_SHIFT
        if vlq:
            digit |= VLQ_CONTINUATION
        chars.append(BASE64[digit])
        if not vlq:
            return ''.join(chars)


def decode_vlq(segment):
    values = []
    value = shift = 0
    for char in segment:
        digit = BASE64.index(char)
        value += (digit & VLQ_MASK) << shift
        if digit & VLQ_CONTINUATION:
            shift += VLQ_SHIFT
            continue
        values.append(-(value >> 1) if value & 1 else value >> 1)
        value = shift = 0
    return values


class Mapping(NamedTuple):
    generated: Tuple[int, int]
    original: Optional[Tuple[int, int]] = None
    source: Optional[str] = None
    name: Optional[str] = None


class SourceMap:

    def __init__(self, file=None):
        self.file = file
        self.sources = []
        self.names = []
        self.mappings = []

    def add_source(self, source):
        if source not in self.sources:
            self.sources.append(source)

    def add_mapping(self, generated, original=None, source=None, name=None):
        if source is not None:
            self.add_source(source)
        if name is not None and name not in self.names:
            self.names.append(name)
        self.mappings.append(Mapping(generated, original, source, name))

    def encode_mappings(self):
        lines = []
        segments = []
        line = 1
        column = source = original_line = original_column = name = 0
        previous = None

        for mapping in sorted(self.mappings, key=lambda m: m.generated):
            if mapping == previous:
                continue
            previous = mapping

            generated_line, generated_column = mapping.generated
            while line < generated_line:
                lines.append(','.join(segments))
                segments = []
                column = 0
                line += 1

            segment = encode_vlq(generated_column - column)
            column = generated_column

            if mapping.source is not None and mapping.original is not None:
                index = self.sources.index(mapping.source)
                segment += encode_vlq(index - source)
                source = index

                segment += encode_vlq(mapping.original[0] - 1 - original_line)
                original_line = mapping.original[0] - 1

                segment += encode_vlq(mapping.original[1] - original_column)
                original_column = mapping.original[1]

                if mapping.name is not None:
                    index = self.names.index(mapping.name)
                    segment += encode_vlq(index - name)
                    name = index

            segments.append(segment)

        lines.append(','.join(segments))
        return ';'.join(lines) if self.mappings else ''

    def to_dict(self):
        result = {'version': 3}
        if self.file is not None:
            result['file'] = self.file
        result['sources'] = list(self.sources)
        result['names'] = list(self.names)
        result['mappings'] = self.encode_mappings()
        return result

    def __str__(self):
        return json.dumps(self.to_dict())
