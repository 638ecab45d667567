"""Identity of an uploaded file across Streamlit reruns."""

from typing import Any, Optional, Tuple


def upload_key(uploaded_file: Any) -> Optional[Tuple[str, str, int]]:
    """
    Key that changes whenever a different upload is in the widget.

    Streamlit gives every upload its own `file_id`, so re-uploading an edited
    file with the same name still produces a new key. None means the uploader
    is empty.
    """
    if uploaded_file is None:
        return None
    return (
        str(getattr(uploaded_file, "file_id", "") or ""),
        uploaded_file.name,
        int(getattr(uploaded_file, "size", 0) or 0),
    )
