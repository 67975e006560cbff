"""Ranking strategies and the orchestrator that dispatches to them.

Import concrete modules directly (``mcp_tool_search.search.bm25`` etc.);
the package itself stays import-light because the document model depends
on the tokenizer living here.
"""
