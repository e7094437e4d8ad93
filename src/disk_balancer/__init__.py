"""
disk_balancer

This package builds disk balancer plans for a single storage node.

We keep modules small and well separated:
core contains shared data structures, errors and option helpers
cluster contains the cluster model and the connectors that load it
planner contains the planner interface and loaders
command contains the plan command and its steps
cli wires everything together for the console
"""
