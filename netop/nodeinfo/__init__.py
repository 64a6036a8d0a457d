"""Node attributes taken from labels, filters over nodes, and a provider of node attributes."""