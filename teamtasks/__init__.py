"""Team Tasks - team task management with workload rebalancing"""

__version__ = "0.1.0"
