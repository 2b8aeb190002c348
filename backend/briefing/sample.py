"""Canned briefing served when the dashboard runs in sample mode."""

SAMPLE_BRIEFING = """\
### AAPL Stock Briefing

**Current Price & Movement**
AAPL closed at **$274.62** on February 9, 2026, down **-3.24 (-1.17%)** from the prior day. After-hours trading showed **$274.02**, down an additional **-0.60 (-0.22%)**. Recent intraday open was at **$274.62**. The stock is near its 52-week high of **$288.62** (low: **$169.21**), with monthly performance up from January 2026's **$259.48** and December 2025's **$271.86**.

| Date | Close Price | Change |
|------|-------------|--------|
| Feb 9, 2026 | $274.62 | -1.17% |
| Feb 6, 2026 | $278.12 | N/A |
| Feb 5, 2026 | $275.91 | N/A |
| Feb 4, 2026 | $276.49 | N/A |
| Feb 3, 2026 | $269.48 | N/A |

**Technical Indicators**
- **50-day MA**: **$267.88** (stock trading above, bullish)
- **200-day MA**: **$254.61** (stock well above, strong bullish)
- **RSI, MACD**: Not available in current data (neutral; monitor for overbought signals near 52-week high).
- **Support/Resistance**: Support near **$269** (recent low); resistance at **$288.62** (52-week high).
Market cap: **$4.03T**; P/E: **34.72**; Beta: **1.09**.

| Indicator | Value | Signal |
|-----------|-------|--------|
| 50-day MA | $267.88 | Bullish |
| 200-day MA | $254.61 | Bullish |
| Quick Ratio | 0.94 | Neutral |
| Debt/Equity | 0.87 | Neutral |

**Recent News & Events**
- Q1 FY2026 earnings (ended Dec 27, 2025): EPS **$2.84** (beat $2.67 est.), revenue **$143.76B** (beat $138.25B est., +15.7% YoY). ROE: **159.94%**.
- Quarterly dividend: **$0.26/share** (ex-date Feb 9, pay Feb 12; yield **0.4%**).
- Cairn Investment Group sold shares (minor institutional move).

**Analyst Sentiment**
Consensus: **Moderate Buy** (1 Strong Buy, 23 Buy, 11 Hold, 1 Sell). Average PT: **$291.70**. Recent updates:
- Rosenblatt: PT **$267** (Neutral)
- JPMorgan: PT **$325** (Overweight)
- Loop Capital: **Buy**, PT **$325**
- Barclays: **Underweight**, PT **$239** (Bearish)
FY2026 EPS forecast: **$7.28**.

**Actionable Recommendation: Buy**
AAPL shows strength above key MAs post-earnings beat, with bullish analyst consensus targeting above current price. Hold through dividend payout; target **$290+**. Risks: Recent -1.17% drop may signal short-term pullback -- enter on dip to $270 support."""
