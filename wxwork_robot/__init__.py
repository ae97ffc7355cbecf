"""Command matching engine for the WXWork chat robot."""
