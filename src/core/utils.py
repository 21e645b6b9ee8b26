# src/core/utils.py
def format_playback_time(seconds: int) -> str:
    """
    Format seconds as MM:SS, e.g. 185 -> "03:05".
    Minutes are not wrapped into hours.
    """
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}:{seconds % 60:02d}"
