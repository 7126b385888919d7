# =============================================================================
# agent/shopping_agent.py  —  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Creates the shopping assistant agent: a Google ADK Agent whose
#   reasoning model is reached through LiteLlm and whose only capability
#   is the `commerce` tool served by tools/mcp_server.py.
#
#   ┌──────────────────────┐      stdio       ┌───────────────────────┐
#   │  ADK Agent           │ ───────────────▶ │  FastMCP server       │
#   │  prompt + LiteLlm    │   MCP protocol   │  tool: commerce       │
#   └──────────────────────┘                  └───────────┬───────────┘
#                                                         ▼
#                                             ┌───────────────────────┐
#                                             │  core/ (pure Python)  │
#                                             └───────────────────────┘
#
# MODEL:
#   COMMERCE_AGENT_MODEL picks the LiteLlm model string
#   (default "openrouter/openai/gpt-4o"; LiteLlm reads OPENROUTER_API_KEY).
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_shopping_advisor_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"


def create_agent() -> Agent:
    """Create the shopping advisor agent wired to the commerce MCP server.

    The server is started as a subprocess with `uv run` from the project
    root, so it runs inside the project's virtual environment and resolves
    its data directory the same way as a standalone run.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "--directory", project_root, "python", "-m", "tools.mcp_server"],
        ),
    )

    return Agent(
        name="shopping_advisor",
        model=LiteLlm(model=os.environ.get("COMMERCE_AGENT_MODEL", DEFAULT_MODEL)),
        instruction=get_shopping_advisor_prompt(),
        tools=[mcp_tools],
    )
