"""
Run the API under uvicorn with one worker process per usable core.
Run: python scripts/serve.py
"""
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import uvicorn

from printbooth.cluster import plan_cluster
from printbooth.config import get_settings


def main():
    settings = get_settings()
    plan = plan_cluster(cap_mb=settings.worker_memory_limit_mb)
    print("Print Booth server starting")
    print(f"  CPU cores:          {plan.cpus}")
    print(f"  Total memory:       {plan.total_memory_mb}MB")
    print(f"  Workers:            {plan.workers}")
    print(f"  Memory per worker:  ~{plan.memory_per_worker_mb}MB")
    uvicorn.run("printbooth.main:app", host="0.0.0.0", port=settings.port, workers=plan.workers)


if __name__ == "__main__":
    main()
