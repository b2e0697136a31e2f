from mcp_k8s.cli import app

app(prog_name="mcp-k8s")
