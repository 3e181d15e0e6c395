"""Custom CSS injected into the Streamlit page."""


def get_custom_css() -> str:
    return """
<style>
.block-container{padding-top:1.5rem;padding-bottom:2rem;}
.po-eyebrow{font-size:12px;text-transform:uppercase;letter-spacing:.08em;color:#6366f1;margin-bottom:0;}
.po-chip{display:inline-block;background:#f8fafc;border-radius:8px;padding:6px 14px;margin-right:8px;
  font-size:13px;color:#475569;box-shadow:inset 0 1px 2px rgba(0,0,0,.06);}
.po-chip b{color:#1e293b;}
.info-tile{border:1px solid #e5e7eb;border-radius:12px;padding:14px 18px;margin-bottom:10px;background:#fff;}
.info-tile.accent{background:#eef2ff;border-color:#c7d2fe;}
.info-tile .label{font-size:13px;color:#6b7280;font-weight:500;}
.info-tile .value{font-size:22px;font-weight:600;color:#111827;margin-top:2px;}
</style>
"""
