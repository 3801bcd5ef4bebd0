# ==============================================================================
# Session Classifier - Pure Domain Logic
# ==============================================================================
"""
Decoding, classification and version extraction for session properties.

All functions here are pure: they take decoded values and return new ones,
with no database or logging dependencies.
"""

from pydantic import ValidationError

from appversions.core.models import (
    DESKTOP_APP_MARKER,
    MOBILE_OPERATING_SYSTEMS,
    ClientClass,
    SessionProperties,
)
from appversions.errors import DecodeError


def decode_properties(props_json: str, device_id: str) -> SessionProperties:
    """
    Decode a session's JSON property blob.

    Args:
        props_json: Raw JSON text from the session row
        device_id: Device ID column of the session row. Overrides whatever
            the JSON blob carries.

    Returns:
        Decoded, immutable SessionProperties

    Raises:
        DecodeError: If the JSON is malformed or a field has the wrong type
    """
    try:
        props = SessionProperties.model_validate_json(props_json)
    except ValidationError as e:
        raise DecodeError(f"Error unmarshalling JSON: {e}", raw=props_json) from e
    return props.model_copy(update={"device_id": device_id or ""})


def is_mobile(props: SessionProperties) -> bool:
    """Device and OS signals identify a mobile client."""
    return (
        props.is_mobile == "true"
        or props.device_id != ""
        or props.os in MOBILE_OPERATING_SYSTEMS
    )


def is_desktop(props: SessionProperties) -> bool:
    return DESKTOP_APP_MARKER in props.browser


def classify(props: SessionProperties) -> ClientClass:
    """
    Classify a session as desktop, mobile or neither.

    The mobile check runs first: mobile clients may carry browser strings
    that also contain the desktop marker.
    """
    if is_mobile(props):
        return ClientClass.MOBILE
    if is_desktop(props):
        return ClientClass.DESKTOP
    return ClientClass.UNCLASSIFIED


def extract_version(props: SessionProperties, client_class: ClientClass) -> str | None:
    """
    Extract the app version from the browser field.

    Desktop browsers must be exactly "<name>/<version>". Mobile browsers use
    the segment after the last "/" with any "+build" suffix removed.

    Returns:
        The version string, or None when the browser field has no usable
        version for this class
    """
    parts = props.browser.split("/")

    if client_class is ClientClass.DESKTOP:
        if len(parts) != 2:
            return None
        return parts[1]

    if client_class is ClientClass.MOBILE:
        if len(parts) < 2:
            return None
        return parts[-1].split("+", 1)[0]

    return None
