# =============================================================================
# scripts/smoke_client.py  —  Call every commerce action once
# =============================================================================
#
# HOW TO RUN (from the project root):
#   python -m scripts.smoke_client
#
# Connects a FastMCP client to the server in-process, lists the tools,
# and prints the response of each action.  Useful after editing the
# catalog files in data/.
# =============================================================================

import asyncio

from fastmcp import Client

from tools.mcp_server import mcp

FALLBACK_PRODUCT_ID = "B00PHONE001"


def _first_text(result) -> str:
    content = getattr(result, "content", result)
    if content and hasattr(content[0], "text"):
        return content[0].text
    return str(result)


async def main():
    async with Client(mcp) as client:
        tools = await client.list_tools()
        print("TOOLS:", [t.name for t in tools])

        health = await client.read_resource("status://health")
        print("HEALTH:", health[0].text if health else health)

        calls = [
            ("PING", {"action": "ping"}),
            ("ECHO", {"action": "echo", "message": "hello mcp"}),
            ("SEARCH", {
                "action": "search",
                "query": "phone",
                "filters": {"budgetMaxINR": 20000, "minRating": 3.5},
            }),
            ("DETAILS", {"action": "details", "productId": FALLBACK_PRODUCT_ID}),
            ("REVIEWS", {"action": "reviews", "productId": FALLBACK_PRODUCT_ID, "limit": 2}),
            ("BUDGET_TOP", {
                "action": "budget_top",
                "query": "phone",
                "budgetMaxINR": 15000,
                "featurePref": "camera",
                "topK": 3,
            }),
            ("SUSTAINABILITY", {
                "action": "sustainability",
                "weightKg": 0.6,
                "distanceKm": 1200,
                "transport": "road",
                "packaging": "cardboard",
                "packagingWeightKg": 0.25,
            }),
            ("UNKNOWN", {"action": "refund"}),
        ]
        for label, arguments in calls:
            result = await client.call_tool("commerce", arguments)
            print(f"{label}:", _first_text(result))


if __name__ == "__main__":
    asyncio.run(main())
