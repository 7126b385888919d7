# =============================================================================
# main.py  —  Console chat with the shopping advisor
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# The agent (agent/shopping_agent.py) launches tools/mcp_server.py over
# stdio.  Each line typed here becomes one user turn; tool calls are echoed
# with their `action` so you can see which commerce operation ran.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads its API key from the environment when the agent is built.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.shopping_agent import create_agent

APP_NAME = "shopping_advisor"
USER_ID = "demo_user"
EXIT_WORDS = {"quit", "exit", "q"}


def _describe_call(call) -> str:
    args = dict(call.args or {})
    action = args.pop("action", "?")
    extras = {k: v for k, v in args.items() if v is not None}
    return f"{call.name}:{action} {extras}" if extras else f"{call.name}:{action}"


async def _ask(runner: Runner, session_id: str, text: str) -> str:
    """Send one user turn and return the last text the agent produced."""
    message = types.Content(role="user", parts=[types.Part(text=text)])
    answer = ""
    async for event in runner.run_async(user_id=USER_ID, session_id=session_id, new_message=message):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            if getattr(part, "function_call", None):
                print(f"  [tool] {_describe_call(part.function_call)}")
            if getattr(part, "text", None):
                answer = part.text
    return answer


async def chat():
    sessions = InMemorySessionService()
    runner = Runner(agent=create_agent(), app_name=APP_NAME, session_service=sessions)
    session = await sessions.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("Shopping advisor ready. Try: best camera phone under 15000 ('quit' to leave)")
    while True:
        try:
            text = input("\nyou> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return
        if text.lower() in EXIT_WORDS:
            return
        if not text:
            continue

        answer = await _ask(runner, session.id, text)
        print(f"\nadvisor> {answer or '(no answer; check the server log on stderr)'}")


if __name__ == "__main__":
    asyncio.run(chat())
