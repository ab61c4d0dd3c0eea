"""Colors, drawing surfaces and the chaos-game painter."""
