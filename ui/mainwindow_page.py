import streamlit as st

from config import settings


def render():
    st.markdown(
        """
        <style>
          .hero-title{
            font-size: 48px;
            line-height: 1.1;
            margin: .2em 0 .1em 0;
            letter-spacing: .5px;
            text-shadow: 0 2px 8px rgba(0,0,0,.06);
          }
          @media (max-width: 768px){
            .hero-title{ font-size: 34px; }
          }
          @media (prefers-color-scheme: dark){
            .hero-title{ color: #f3f4f6; }
          }
        </style>
        """,
        unsafe_allow_html=True,
    )

    st.markdown(
        f'<div class="hero-title">{settings.page_title} 🔐</div>',
        unsafe_allow_html=True,
    )

    st.markdown(
        "Random passwords and keys from your operating system's secure random source. "
        "Nothing is stored or sent anywhere."
    )

    st.info("Open **Generator** in the sidebar to start.")
