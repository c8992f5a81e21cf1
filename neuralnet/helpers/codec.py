"""
Persisted layer records.

Every layer serializes to a UTF-8 JSON object carrying a format version and
the layer's type tag, so a reader can tell what it is looking at before it
touches the payload. Python writes floats with their shortest round-trip
representation, so parameters come back bit for bit (NaN and +/-inf included).
"""
import json
import base64
import binascii
import logging
import pathlib

from ..errors import DecodeError

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1

# layer type tag -> callable(bytes) -> layer
LAYERS = {}


def encode_record(record):
    body = {"format_version": FORMAT_VERSION, **record}
    return json.dumps(body, separators=(",", ":")).encode("utf-8")


def decode_record(data, layer_type):
    """
    Parse bytes written by encode_record and check the framing fields.

    Returns the record as a dict. Raises DecodeError if the bytes are not a
    JSON object, the format version is unknown, or the record belongs to a
    different layer kind.
    """
    if not isinstance(data, (bytes, bytearray)):
        raise DecodeError(f"Expected bytes, got {type(data).__name__}")
    try:
        record = json.loads(bytes(data).decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise DecodeError(f"Layer record is not valid JSON: {e}") from e
    if not isinstance(record, dict):
        raise DecodeError("Layer record must be a JSON object")

    version = record.get("format_version")
    if version != FORMAT_VERSION:
        raise DecodeError(f"Unsupported record format version: {version!r}")
    if record.get("layer_type") != layer_type:
        raise DecodeError(
            f"Expected a {layer_type!r} record, got {record.get('layer_type')!r}"
        )
    return record


def encode_bytes(payload):
    return base64.b64encode(payload).decode("ascii")


def decode_bytes(text):
    if not isinstance(text, str):
        raise DecodeError(f"Expected base64 text, got {type(text).__name__}")
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (UnicodeEncodeError, binascii.Error) as e:
        raise DecodeError(f"Malformed base64 payload: {e}") from e


def record_int(record, key):
    value = record.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise DecodeError(f"{key} must be a positive integer, got {value!r}")
    return value


def record_floats(values, length, what):
    """Validate a JSON list of numbers of the given length; returns floats."""
    if not isinstance(values, list) or len(values) != length:
        got = len(values) if isinstance(values, list) else type(values).__name__
        raise DecodeError(f"{what}: expected {length} values, got {got}")
    floats = []
    for v in values:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise DecodeError(f"{what}: {v!r} is not a number")
        try:
            floats.append(float(v))
        except OverflowError as e:
            # JSON integers are unbounded
            raise DecodeError(f"{what}: integer out of float range") from e
    return floats


# ---------- layer-kind registry ----------
def _same_class(a, b):
    return (a.__module__, a.__qualname__) == (b.__module__, b.__qualname__)


def register_layer(tag):
    """Class decorator registering cls.deserialize under a layer type tag."""
    def wrap(cls):
        previous = LAYERS.get(tag)
        # a reloaded module re-registers the same class under a new identity
        if previous is not None and not _same_class(previous.__self__, cls):
            raise ValueError(f"Layer type {tag!r} is already registered")
        LAYERS[tag] = cls.deserialize
        logger.debug("Registered layer %s as %r", cls.__name__, tag)
        return cls
    return wrap


def deserialize_layer(data, layer_type=None):
    """
    Rebuild any registered layer kind from its serialized bytes.

    When layer_type is omitted the record's own layer_type field picks the
    deserializer.
    """
    if layer_type is None:
        try:
            layer_type = json.loads(bytes(data).decode("utf-8")).get("layer_type")
        except (TypeError, UnicodeDecodeError, ValueError, AttributeError, RecursionError) as e:
            raise DecodeError(f"Cannot read layer type from record: {e}") from e
    if not isinstance(layer_type, str):
        raise DecodeError(f"layer_type must be a string, got {layer_type!r}")
    if layer_type not in LAYERS:
        raise DecodeError(
            f"Unknown layer type: {layer_type!r}. Available: {sorted(LAYERS)}"
        )
    return LAYERS[layer_type](data)


# ---------- files ----------
def save_layer(layer, path):
    path = pathlib.Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(layer.serialize())
    logger.debug("Saved %s layer to %s", layer.serializer_type(), path)
    return str(path)


def load_layer(path):
    path = pathlib.Path(path)
    layer = deserialize_layer(path.read_bytes())
    logger.debug("Loaded %s layer from %s", layer.serializer_type(), path)
    return layer
