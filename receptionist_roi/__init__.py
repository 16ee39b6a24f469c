"""AI receptionist ROI calculator."""
