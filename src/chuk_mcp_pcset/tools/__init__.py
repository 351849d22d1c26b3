"""
MCP tool implementations.

Tools are organized by domain:
- analysis - Normal order, prime form, T_n / I_n and the T/I table
"""

from chuk_mcp_pcset.tools.analysis import register_analysis_tools

__all__ = [
    "register_analysis_tools",
]
