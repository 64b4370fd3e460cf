"""VoiceHub - backend of the Common Voice Luo voice-data collection platform."""
