"""
MCP (Model Context Protocol) Server Package

Tool registry and tools that expose the task store, the workspace files and
process metrics as invokable tools. The same registry serves the HTTP
tool-call endpoint and the stdio MCP transport.
"""
