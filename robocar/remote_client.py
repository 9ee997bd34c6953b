"""UDP remote-control client that streams drive commands to a robot car."""

from __future__ import annotations

import ipaddress
import socket
import struct
import threading
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

DEFAULT_PORT = 8888
DEFAULT_INTERVAL = 0.01
MAX_DATAGRAM = 255
MAX_LINES = 10
NO_PACKET = "no packet"

_PACKET = struct.Struct("<iii?3x5f")


@dataclass
class DataPacket:
    """One control datagram: wheel speeds, turn, null-position flag and gains."""

    speed_x: int = 0
    speed_y: int = 0
    turn: int = 0
    null_position: bool = False
    kp: float = 0.0
    kd: float = 0.0
    ki: float = 0.0
    kf: float = 0.0
    kt: float = 0.0

    def pack(self) -> bytes:
        """Encode the packet in its 36-byte little-endian wire layout."""
        return _PACKET.pack(
            self.speed_x,
            self.speed_y,
            self.turn,
            self.null_position,
            self.kp,
            self.kd,
            self.ki,
            self.kf,
            self.kt,
        )


class RemoteClient:
    """Sends a :class:`DataPacket` to the car on a timer and collects replies.

    While connected, :meth:`update` runs every ``interval`` seconds on a
    background thread. Replies from the car are appended to a console text
    that holds at most ten messages before it is cleared.
    """

    def __init__(
        self,
        port: int = DEFAULT_PORT,
        sock: Optional[socket.socket] = None,
        interval: float = DEFAULT_INTERVAL,
        on_text_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        self._port = port
        self._sock = (
            sock if sock is not None else socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        )
        self._sock.setblocking(False)
        self._interval = interval
        self._on_text_changed = on_text_changed

        self.packet = DataPacket(kp=0.2, kd=0.02, ki=0.0001)
        self._speed = 0.0
        self._turn = 0.0
        self._turn_coefficient = 1.0
        self._text = ""
        self._lines = 0
        self._address: Optional[Tuple[str, int]] = None

        self._lock = threading.RLock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def turn_coefficient(self) -> float:
        """Multiplier applied to the turn speed."""
        return self._turn_coefficient

    def text_input(self) -> str:
        """The console text built from the car's replies."""
        return self._text

    def _set_text(self, text: str) -> None:
        if text == self._text:
            return
        self._text = text
        if self._on_text_changed is not None:
            self._on_text_changed()

    def is_active(self) -> bool:
        """Return True while the send timer is running."""
        return self._thread is not None and self._thread.is_alive()

    def set_speed(self, speed: int) -> None:
        """Set the forward speed sent to both wheels."""
        self._speed = speed

    def set_turn(self, turn: int) -> None:
        """Set the turn speed."""
        self._turn = turn

    def set_null_position(self, enabled: bool) -> None:
        """Set the null-position flag of the packet."""
        self.packet.null_position = bool(enabled)

    def set_kp(self, value: float) -> None:
        self.packet.kp = value

    def set_kd(self, value: float) -> None:
        self.packet.kd = value

    def set_ki(self, value: float) -> None:
        self.packet.ki = value

    def set_kf(self, value: float) -> None:
        self.packet.kf = value

    def set_kt(self, value: float) -> None:
        self.packet.kt = value

    def set_turn_coefficient(self, coefficient: int) -> None:
        """Set the turn multiplier; negative values mean ``1/|value|``, 0 means 1."""
        coefficient = coefficient or 1
        if coefficient >= 0:
            self._turn_coefficient = float(abs(coefficient))
        else:
            self._turn_coefficient = 1.0 / abs(coefficient)

    def toggle_connection(self, ip_address: str) -> bool:
        """Start streaming to ``ip_address``, or stop if already streaming.

        Returns True when streaming was started. Stopping resets the drive
        state and sends one final all-zero packet.
        """
        if not self.is_active():
            address = str(ipaddress.ip_address(ip_address))
            with self._lock:
                self._address = (address, self._port)
            self._stop = threading.Event()
            self._thread = threading.Thread(target=self._run, daemon=True)
            self._thread.start()
            return True

        with self._lock:
            self._speed = 0.0
            self._turn = 0.0
            self.packet = DataPacket()
        self._stop_timer()
        self.update()
        return False

    def _run(self) -> None:
        stop = self._stop
        while not stop.wait(self._interval):
            self.update()

    def _stop_timer(self) -> None:
        thread = self._thread
        if thread is None:
            return
        self._stop.set()
        if thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def update(self) -> None:
        """Send the current packet and read one reply into the console text."""
        with self._lock:
            if self._address is None:
                raise RuntimeError("no car address; connect first")
            self.packet.speed_x = int(self._speed)
            self.packet.speed_y = int(self._speed)
            self.packet.turn = int(self._turn * self._turn_coefficient)

            try:
                self._sock.sendto(self.packet.pack(), self._address)
            except OSError:
                pass

            try:
                data = self._sock.recv(MAX_DATAGRAM)
                message = data.split(b"\0", 1)[0].decode("utf-8", "replace")
            except OSError:
                message = NO_PACKET

            if self._lines < MAX_LINES:
                self._set_text(f"{self._text}  {message}")
            else:
                self._set_text("")
                self._lines = 0
            self._lines += 1

    def close(self) -> None:
        """Stop the timer and close the socket."""
        self._stop_timer()
        self._sock.close()

    def __enter__(self) -> "RemoteClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()