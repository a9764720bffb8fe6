"""
templates.py — Hand-written component skeletons used when generation fails.

Each skeleton is a minimal functional component that passes children through,
accepts an optional className, declares propTypes and exports itself as the
default export.  The only substitution is the component name, so output is a
pure function of (styling mode, component name).
"""

from __future__ import annotations

from typing import Dict, Optional

from config import StylingMode

_NAME_PLACEHOLDER = "__COMPONENT_NAME__"

_PLAIN_TEMPLATE = """\
import React from 'react';
import PropTypes from 'prop-types';

const __COMPONENT_NAME__ = ({ children, className = '' }) => {
  return (
    <div className={className}>
      {children}
    </div>
  );
};

__COMPONENT_NAME__.propTypes = {
  children: PropTypes.node,
  className: PropTypes.string,
};

export default __COMPONENT_NAME__;
"""

_TAILWIND_TEMPLATE = """\
import React from 'react';
import PropTypes from 'prop-types';

const __COMPONENT_NAME__ = ({ children, className = '' }) => {
  return (
    <div className={`p-4 rounded-lg shadow-md bg-white ${className}`}>
      {children}
    </div>
  );
};

__COMPONENT_NAME__.propTypes = {
  children: PropTypes.node,
  className: PropTypes.string,
};

export default __COMPONENT_NAME__;
"""

_BOOTSTRAP_TEMPLATE = """\
import React from 'react';
import PropTypes from 'prop-types';

const __COMPONENT_NAME__ = ({ children, className = '' }) => {
  return (
    <div className={`card ${className}`}>
      <div className="card-body">
        {children}
      </div>
    </div>
  );
};

__COMPONENT_NAME__.propTypes = {
  children: PropTypes.node,
  className: PropTypes.string,
};

export default __COMPONENT_NAME__;
"""

TEMPLATES: Dict[StylingMode, str] = {
    StylingMode.NONE: _PLAIN_TEMPLATE,
    StylingMode.TAILWIND: _TAILWIND_TEMPLATE,
    StylingMode.BOOTSTRAP: _BOOTSTRAP_TEMPLATE,
}


def render_template(styling_mode: StylingMode, component_name: str) -> str:
    """Return the skeleton for *styling_mode* declared as *component_name*."""
    return TEMPLATES[styling_mode].replace(_NAME_PLACEHOLDER, component_name)


def render_fallback(
    styling_mode: StylingMode,
    component_name: str,
    description: Optional[str] = None,
) -> str:
    """Skeleton with the user's description as a leading comment line."""
    source = render_template(styling_mode, component_name)
    if description:
        summary = " ".join(description.split())
        source = f"// {summary}\n{source}"
    return source
