"""
Basic usage examples for the Pinport API client.

This example demonstrates:
- Client initialization from the environment (PINPORT_API_URL, PINPORT_KEY)
- CRUD operations on pins
- Error handling
"""

import asyncio
import logging

from pinport_client import CreatePin, Pin, PinportClient, PinportRequestError, Position, UpdatePin


async def main():
    """Main example function."""

    logging.basicConfig(level=logging.DEBUG)

    async with PinportClient.from_settings() as pinport:
        try:
            # Create pins
            print("➕ Creating pins...")
            created = await pinport.create_pins([
                CreatePin(
                    meta_id="meta1",
                    position=Position(x=1, y=2, z=3),
                    html="<div>Pin 1</div>",
                    opacity=0.8,
                    enable_line=True,
                    icon="icon1",
                ),
                CreatePin(
                    meta_id="meta1",
                    position=Position(x=4, y=5, z=6),
                    offset=Position(x=1, y=1, z=1),
                    html="<div>Pin 2</div>",
                    alert=True,
                ),
            ])
            pins = [Pin.model_validate(pin) for pin in created]
            print(f"✅ Created {len(pins)} pins")
            print()

            # Get the pins by meta id
            print("🔍 Fetching pins for meta1...")
            for pin in await pinport.get_pins("meta1"):
                print(f"  • {pin['id']}: {pin['html']}")
            print()

            # Update the first pin
            print(f"✏️  Updating pin {pins[0].id}...")
            await pinport.update_pins([UpdatePin(id=pins[0].id, html="<div>Updated</div>")])
            print()

            # Metadata
            metadata = await pinport.get_metadata("meta1")
            print(f"📋 Metadata: {metadata}")
            print()

            # Delete the pins
            print("🗑️  Deleting pins...")
            result = await pinport.delete_pins([pin.id for pin in pins])
            print(f"✅ Deleted {result['deleted']} pins")

        except PinportRequestError as e:
            print(f"❌ API Error: {e}")
            print(f"   Status: {e.status}")
            for issue in e.issues:
                print(f"   {issue.path}: {issue.message}")


if __name__ == "__main__":
    asyncio.run(main())
