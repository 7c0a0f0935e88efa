"""
Reference dictionary links.
"""

from typing import Optional

from fix_helper.core.config import ONIXS_DICTIONARY_URL
from fix_helper.dictionary.codes import reference_path_for


def get_onixs_url(version_id: str, tag_number: int, base_url: Optional[str] = None) -> str:
    """
    Build the OnixS FIX dictionary page URL for a tag.

    Example: ``FIX.4.4`` and ``54`` give
    ``https://www.onixs.biz/fix-dictionary/4.4/tagNum_54.html``.
    """
    base = (base_url or ONIXS_DICTIONARY_URL).rstrip("/")
    return f"{base}/{reference_path_for(version_id)}/tagNum_{tag_number}.html"
