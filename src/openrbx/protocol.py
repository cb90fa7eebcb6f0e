"""Protocol URL construction."""

from openrbx.config import DEFAULT_SCHEME
from openrbx.models import LaunchParameters

SEGMENT_DELIMITER = "+"
KEY_VALUE_DELIMITER = ":"


def build_protocol_url(params: LaunchParameters, scheme: str = DEFAULT_SCHEME) -> str:
    """Build the URL handed to the OS handler for the Roblox Studio scheme.

    Fields always appear as launchmode, task, placeId, universeId. Values are
    inserted verbatim, so they must not contain ``+`` or ``:``.
    """
    fields = [
        ("launchmode", params.launch_mode),
        ("task", params.task),
        ("placeId", params.place_id),
        ("universeId", params.universe_id),
    ]
    segments = [f"{key}{KEY_VALUE_DELIMITER}{value}" for key, value in fields]
    return SEGMENT_DELIMITER.join([scheme, *segments])
