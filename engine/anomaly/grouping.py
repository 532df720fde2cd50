"""
Grouping logic that partitions a metric's hourly observations into one group per context (page, device type, referrer, category) plus a single context-free global group.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from __future__ import annotations

from typing import Dict, Iterable, List

from engine.models import GroupKey, Observation

GroupMap = Dict[GroupKey, List[Observation]]


def group_observations(observations: Iterable[Observation]) -> GroupMap:
    groups: GroupMap = {}
    global_key = GroupKey.global_()

    for obs in observations:
        groups.setdefault(GroupKey.of(obs), []).append(obs)
        # the global group only keeps timestamp and value
        groups.setdefault(global_key, []).append(obs.stripped())

    return groups
