"""
Decoder command interpreter.

Every request is one text line. The reply, if any, is one line terminated by
CRLF. Unknown commands are dropped without a reply so a client probing for
features never desynchronises the stream.
"""

from typing import Optional, Tuple

PROTOCOL_VERSION = "2.0"

RESP_GETMODE = b"GETMODE;OPERATION\r\n"
RESP_SETPROTOCOL = f"SETPROTOCOL;{PROTOCOL_VERSION}\r\n".encode("ascii")
RESP_PUSH_ON = b"SETPUSHPASSINGS;1\r\n"
RESP_PUSH_OFF = b"SETPUSHPASSINGS;0\r\n"


def handle_command(line: str) -> Tuple[Optional[bytes], Optional[bool]]:
    """Interpret one request line.

    Returns (response, push) where push is True/False when the command
    switches passing push on/off, and None when push mode is untouched.
    """
    msg = line.strip()
    if not msg:
        return None, None

    if msg == "GETMODE":
        return RESP_GETMODE, None
    if msg.startswith("SETPROTOCOL"):
        return RESP_SETPROTOCOL, None
    if msg.startswith("SETPUSHPASSINGS"):
        parts = msg.split(";")
        # too few fields means "off", not an error
        if len(parts) >= 2 and parts[1] == "1":
            return RESP_PUSH_ON, True
        return RESP_PUSH_OFF, False
    # PING and everything else: no reply
    return None, None
