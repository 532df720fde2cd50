"""
Static dashboard page listing the strongest anomaly insights.

The page is self-contained: it calls ``/api/insights/anomalies`` from the
browser, renders the top three insights and draws a sparkline of scores.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from config import settings

router = APIRouter(tags=["Dashboard"])

TOP_INSIGHTS = 3
MAX_SPARKLINE_POINTS = 14

DASHBOARD_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <title>Anomaly insights</title>
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <style>
    body { font-family: Arial, Helvetica, sans-serif; margin: 16px; color: #111; font-size: 16px; line-height: 1.4; }
    h1 { font-size: 24px; margin: 0 0 8px; }
    h2 { font-size: 18px; margin: 20px 0 8px; }
    .note, .small { font-size: 14px; color: #555; }
    .insight { border: 1px solid #ccc; border-radius: 4px; padding: 10px; margin-bottom: 8px; background: #fafafa; }
    .insight-title { font-weight: bold; margin-bottom: 4px; }
    .insight-line { font-size: 14px; margin-bottom: 2px; }
    .change { font-weight: bold; margin-left: 6px; }
    .change.up { color: #137333; }
    .change.down { color: #c5221f; }
    #sparkline { width: 100%; height: 120px; border: 1px solid #ccc; border-radius: 2px; display: block; }
  </style>
</head>
<body>
  <h1>Anomaly insights</h1>
  <p class="note">The strongest anomalies found in the last __WINDOW__ hours.</p>

  <h2>Top insights</h2>
  <div id="insights-list"><p class="small">Loading...</p></div>

  <h2>Scores</h2>
  <canvas id="sparkline" width="400" height="120"></canvas>
  <p class="small">Each point is an anomaly. Higher means a stronger change against the baseline.</p>

  <script>
    var TOP = __TOP__;
    var MAX_POINTS = __MAX_POINTS__;

    function text(value) {
      var span = document.createElement("span");
      span.textContent = value == null ? "" : String(value);
      return span.innerHTML;
    }

    function contextLine(ctx) {
      if (!ctx) return "";
      var parts = [];
      if (ctx.page) parts.push("Page: " + text(ctx.page));
      if (ctx.deviceType) parts.push("Device: " + text(ctx.deviceType));
      if (ctx.referrer) parts.push("Referrer: " + text(ctx.referrer));
      if (ctx.category) parts.push("Category: " + text(ctx.category));
      return parts.join(" | ");
    }

    function drawSparkline(canvas, scores) {
      var ctx = canvas.getContext("2d");
      ctx.clearRect(0, 0, canvas.width, canvas.height);
      if (scores.length === 0) return;

      var max = Math.max.apply(null, scores);
      var min = Math.min.apply(null, scores);
      var pad = 10;
      var w = canvas.width - pad * 2;
      var h = canvas.height - pad * 2;

      function x(i) { return scores.length === 1 ? pad + w / 2 : pad + (w * i) / (scores.length - 1); }
      function y(s) { return max === min ? pad + h / 2 : pad + (1 - (s - min) / (max - min)) * h; }

      ctx.beginPath();
      ctx.lineWidth = 1.5;
      ctx.strokeStyle = "#000";
      scores.forEach(function (s, i) { if (i === 0) ctx.moveTo(x(i), y(s)); else ctx.lineTo(x(i), y(s)); });
      ctx.stroke();

      ctx.fillStyle = "#000";
      scores.forEach(function (s, i) { ctx.beginPath(); ctx.arc(x(i), y(s), 3, 0, Math.PI * 2); ctx.fill(); });
    }

    async function loadInsights() {
      var listEl = document.getElementById("insights-list");
      var canvas = document.getElementById("sparkline");
      try {
        var res = await fetch("/api/insights/anomalies");
        var data = await res.json();
        if (!Array.isArray(data) || data.length === 0) {
          listEl.innerHTML = "<p class='small'>No anomalies found for this time window.</p>";
          drawSparkline(canvas, []);
          return;
        }

        var sorted = data.slice().sort(function (a, b) { return (b.score || 0) - (a.score || 0); });
        listEl.innerHTML = "";
        sorted.slice(0, TOP).forEach(function (insight) {
          var dir = (insight.change || "").trim().charAt(0) === "-" ? "down" : "up";
          var ctxText = contextLine(insight.context);
          var div = document.createElement("div");
          div.className = "insight";
          div.innerHTML =
            "<div class='insight-title'>" + text(insight.metric || "Metric") + "</div>" +
            "<div class='insight-line'>Type: " + text(insight.type) +
            "<span class='change " + dir + "'>" + text(insight.change) + "</span></div>" +
            (ctxText ? "<div class='insight-line'>" + ctxText + "</div>" : "") +
            "<div class='insight-line'>" + text(insight.possibleCause) + "</div>";
          listEl.appendChild(div);
        });

        var scores = sorted
          .map(function (i) { return Math.abs(i.score || 0); })
          .filter(function (v) { return v > 0; })
          .slice(0, MAX_POINTS);
        drawSparkline(canvas, scores);
      } catch (err) {
        console.error(err);
        listEl.innerHTML = "<p class='small'>Could not load insights.</p>";
        drawSparkline(canvas, []);
      }
    }

    loadInsights();
  </script>
</body>
</html>
"""


def render_dashboard(window_hours: int) -> str:
    return (
        DASHBOARD_HTML.replace("__WINDOW__", str(window_hours))
        .replace("__TOP__", str(TOP_INSIGHTS))
        .replace("__MAX_POINTS__", str(MAX_SPARKLINE_POINTS))
    )


@router.get("/insights", response_class=HTMLResponse)
async def dashboard() -> HTMLResponse:
    return HTMLResponse(render_dashboard(settings.window_hours))
