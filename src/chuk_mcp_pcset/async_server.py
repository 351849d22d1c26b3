#!/usr/bin/env python3
"""
Async Pitch-Class Set MCP Server using chuk-mcp-server

This server provides MCP tools for atonal set-theory analysis in
12-tone equal temperament.

The server provides tools for:
- Normal order and prime form of a pitch-class set
- Transposition (T_n) and inversion (I_n)
- Listing all 12 transpositions and inversions
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_pcset.tools import register_analysis_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-pcset")

# Register all tools
analysis_tools = register_analysis_tools(mcp)

# Export tool functions for direct access
pcset_analyze = analysis_tools["pcset_analyze"]
pcset_normal_order = analysis_tools["pcset_normal_order"]
pcset_prime_form = analysis_tools["pcset_prime_form"]
pcset_transpose = analysis_tools["pcset_transpose"]
pcset_invert = analysis_tools["pcset_invert"]
pcset_ti_table = analysis_tools["pcset_ti_table"]

logger.info("CHUK Pitch-Class Set MCP Server initialized")
logger.info(f"  Tools: {', '.join(sorted(analysis_tools))}")
