"""Math extension popups."""

from ..decoding import decode
from ..session import RestApi
from ..types import PopupInfo


async def popup_html(api: RestApi, qid: int | str) -> PopupInfo:
    """Fetch the popup content for a Wikidata item.

    The endpoint lives under the unversioned ``/math/v0`` root.

    Args:
        api: Session to use.
        qid: Item ID, as a number or as "Q123".
    """
    item = str(qid).upper().removeprefix("Q")
    data = await api.fetch_json(f"/math/v0/popup/html/{item}")
    return decode(PopupInfo, data)
