#!/usr/bin/env python
"""Fetch alert policies and conditions from the New Relic Alerts API into a JSON file.

Examples:
  python scripts/fetch_alerts.py --resource policies --name production --out data/policies.json
  python scripts/fetch_alerts.py --resource conditions --policy-id 111111 --out data/conditions.json
  python scripts/fetch_alerts.py --resource plugins-conditions --policy-id 111111 --out data/plugins.json
  python scripts/fetch_alerts.py --resource infra-conditions --policy-id 111111 --out data/infra.json

Credentials and region come from the environment (NEW_RELIC_API_KEY or
NEW_RELIC_ADMIN_API_KEY, NEW_RELIC_REGION) or from --config FILE.yaml.
"""
from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, List, Optional

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from alerts_client import Alerts, AlertsClientError, Config  # noqa: E402

RESOURCES = ['policies', 'conditions', 'plugins-conditions', 'infra-conditions']


# Load a local .env file without overriding values already set in the environment
def _load_env_file(env_path: Path) -> None:
    if not env_path.exists():
        return
    try:
        lines = env_path.read_text(encoding='utf-8').splitlines()
    except OSError:
        return
    for line in lines:
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        if not k:
            continue
        existing = os.environ.get(k)
        if existing is None or existing.strip() == '':
            os.environ[k] = v


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description='Fetch New Relic alert policies and conditions')
    p.add_argument('--resource', required=True, choices=RESOURCES)
    p.add_argument('--policy-id', type=int, help='Policy ID (required for condition resources)')
    p.add_argument('--name', help='Policy name filter')
    p.add_argument('--config', help='YAML config file (defaults to environment variables)')
    p.add_argument('--out', required=True, help='Output JSON file path')
    p.add_argument('--verbose', action='store_true')
    return p.parse_args(argv)


def fetch(alerts: Alerts, resource: str, policy_id: Optional[int] = None, name: Optional[str] = None) -> List[Any]:
    if resource == 'policies':
        return alerts.list_policies(name=name)
    if policy_id is None:
        raise SystemExit(f'--policy-id required for {resource}')
    if resource == 'conditions':
        return alerts.list_conditions(policy_id)
    if resource == 'plugins-conditions':
        return alerts.list_plugins_conditions(policy_id)
    if resource == 'infra-conditions':
        return alerts.list_infrastructure_conditions(policy_id)
    raise SystemExit(f'Unsupported resource: {resource}')


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(format='[%(levelname)s] %(message)s')
    _load_env_file(Path('.env'))

    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        config = Config.from_yaml(args.config) if args.config else Config.from_env()
        logging.getLogger().setLevel(logging.DEBUG if args.verbose else config.log_level_value)
        alerts = Alerts(config)
        items = fetch(alerts, args.resource, policy_id=args.policy_id, name=args.name)
    except AlertsClientError as e:
        logging.error('%s: %s', type(e).__name__, e)
        return 1

    data = [item.to_payload() for item in items]
    out_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding='utf-8')
    if args.verbose:
        print(f'[done] Wrote {len(data)} {args.resource} to {out_path}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
