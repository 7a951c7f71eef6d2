"""
Example extension for the Pinport client.

Extensions receive the client's bound operations and expose extra
functionality under their key. This one mirrors pins from one meta id to
another, e.g. to copy annotations from one scan of a space to the next.
"""

import asyncio
from typing import Any, Dict, List

from pinport_client import Extension, PinOperations, PinportClient


class PinMirror:
    """Copies the pins of one meta id to another."""

    def __init__(self, ops: PinOperations):
        self._ops = ops

    async def mirror(self, source_meta_id: str, target_meta_id: str) -> List[Dict[str, Any]]:
        pins = await self._ops.get_pins(source_meta_id)
        copies = [
            {key: value for key, value in pin.items() if key != "id"} | {"meta_id": target_meta_id}
            for pin in pins
        ]
        if not copies:
            return []
        return await self._ops.create_pins(copies)


async def main():
    async with PinportClient.from_settings(extensions=[Extension("mirror", PinMirror)]) as pinport:
        copies = await pinport.extensions.mirror.mirror("scan-2023", "scan-2024")
        print(f"✅ Mirrored {len(copies)} pins")


if __name__ == "__main__":
    asyncio.run(main())
