"""
Anomaly insights route.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import List

from fastapi import APIRouter, Depends

from api.responses import Insight
from api.routes.common import get_source
from api.routes.exception import handle_exceptions
from datasources.base import ObservationSource
from services.insight_service import get_anomaly_insights

router = APIRouter(tags=["Insights"])


@router.get("/api/insights/anomalies", response_model=List[Insight])
@handle_exceptions("Analyzer failed")
async def anomaly_insights(source: ObservationSource = Depends(get_source)) -> List[Insight]:
    return await get_anomaly_insights(source)
