"""
Analysis prompts.

Each prompt renders step-by-step instructions that drive an agent through
the read-only tools for a common investigation.
"""

MEMORY_PRESSURE_TEMPLATE = """\
Analyze pods for memory pressure issues. Check for:
1. Pods with memory usage close to their limits
2. Pods with memory usage significantly exceeding their requests
3. Pods that have been OOM killed

Use Kubernetes context: {context}
{scope}

First, fetch pod metrics to analyze memory usage patterns.

<instructions>
1. Use the get_k8s_metrics tool (kind: pod) to fetch current memory usage
2. Use the list_k8s_resources tool (kind: Pod) to get memoryRequestMiB,
   memoryLimitMiB and oomKills for each pod
3. Look for pods where:
   - Memory usage is >80% of the memory limit (high risk of OOM)
   - Memory usage is >120% of the memory request (may cause node pressure)
   - oomKills is above zero or lastTerminationReason is OOMKilled
4. Summarize findings in a table showing:
   - Pod name and namespace
   - Memory usage (current/request/limit)
   - Usage percentage of limit
   - Usage percentage of request
   - OOM kill history if any
5. Highlight critical issues and provide recommendations
</instructions>"""

WORKLOAD_INSTABILITY_TEMPLATE = """\
Analyze Events and pod logs for signs of workload instability in namespace "{namespace}".

Use Kubernetes context: {context}
Target namespace: {namespace}

<instructions>
PHASE 1: Event Analysis
1. Use list_k8s_resources tool to get all Events in the namespace:
   - context: {context}
   - namespace: {namespace}
   - kind: Event

2. Analyze Events for suspicious patterns:
   - Warning type events (especially recurring ones)
   - Failed operations (FailedMount, FailedScheduling, etc.)
   - Security-related events (Unauthorized, Forbidden, etc.)
   - Resource issues (OutOfMemory, DiskPressure, etc.)
   - Network problems (NetworkNotReady, DNSConfigForming, etc.)
   - Image pull failures (ErrImagePull, ImagePullBackOff, etc.)

PHASE 2: Pod Discovery and Log Analysis
1. Use list_k8s_resources tool to get all Pods in the namespace:
   - context: {context}
   - namespace: {namespace}
   - kind: Pod

2. For each pod:
   - Use get_k8s_pod_logs tool with tail=50 for recent logs
   - For multi-container pods, analyze logs from all containers
   - Look for suspicious patterns in logs:
     * ERROR, FATAL, PANIC level messages
     * Authentication/authorization failures
     * Connection timeouts or network errors
     * Resource exhaustion indicators
     * Application crashes or exceptions
     * Database connection failures
     * Certificate or TLS errors

PHASE 3: Analysis and Prioritization
Create a summary organized by criticality:

## CRITICAL ISSUES (Immediate attention required)
- Service outages or complete failures
- Resource exhaustion causing instability
- Persistent application crashes

## HIGH PRIORITY (Address soon)
- Network connectivity issues
- Recurring errors affecting functionality
- Persistent restart loops

## MEDIUM PRIORITY (Monitor and plan)
- Warning-level events that may escalate
- Resource usage approaching limits
- Intermittent connection issues

## LOW PRIORITY (Informational)
- Normal operational events
- Expected temporary conditions

For each finding, include:
- Source (Event or specific pod/container logs)
- Timestamp or frequency information
- Brief description of the issue
- Potential impact assessment
- Recommended actions where applicable

Focus on actionable insights and avoid including normal operational noise.
</instructions>"""


def memory_pressure_analysis(context: str, namespace: str = "") -> str:
    """
    Render the memory pressure analysis prompt.

    Raises:
        ValueError: If context is empty.
    """
    if not context:
        raise ValueError("context argument is required")
    scope = f"Analyze namespace: {namespace}" if namespace else "Analyze all namespaces"
    return MEMORY_PRESSURE_TEMPLATE.format(context=context, scope=scope)


def workload_instability_analysis(context: str, namespace: str) -> str:
    """
    Render the workload instability analysis prompt.

    Raises:
        ValueError: If context or namespace is empty.
    """
    if not context:
        raise ValueError("context argument is required")
    if not namespace:
        raise ValueError("namespace argument is required")
    return WORKLOAD_INSTABILITY_TEMPLATE.format(context=context, namespace=namespace)
